from qwery.infrastructure.agent.actors.conversation_actors import (
    DEFAULT_INTENT,
    detect_intent,
    greeting,
    load_context,
    parse_intent,
    read_data,
    summarize_intent,
)

__all__ = [
    "DEFAULT_INTENT",
    "detect_intent",
    "greeting",
    "load_context",
    "parse_intent",
    "read_data",
    "summarize_intent",
]
