from qwery.infrastructure.agent.prompts.conversation import (
    DETECT_INTENT_PROMPT,
    GREETING_PROMPT,
    SUMMARIZE_INTENT_PROMPT,
)
from qwery.infrastructure.agent.prompts.read_data import READ_DATA_AGENT_PROMPT

__all__ = [
    "DETECT_INTENT_PROMPT",
    "GREETING_PROMPT",
    "READ_DATA_AGENT_PROMPT",
    "SUMMARIZE_INTENT_PROMPT",
]
