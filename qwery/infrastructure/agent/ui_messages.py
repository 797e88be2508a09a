from typing import Any

from qwery.domain.llm_providers.llm_types import Message as LLMMessage

UIMessage = dict[str, Any]


def ui_message_text(ui_message: UIMessage) -> str:
    parts = ui_message.get("parts") or []
    return " ".join(
        str(part.get("text", ""))
        for part in parts
        if isinstance(part, dict) and part.get("type") == "text"
    ).strip()


def last_input_text(messages: list[UIMessage]) -> str:
    """Text of the first part of the last message, or ``""``."""
    if not messages:
        return ""
    parts = messages[-1].get("parts") or []
    if not parts or not isinstance(parts[0], dict):
        return ""
    return parts[0].get("text") or ""


def to_llm_messages(messages: list[UIMessage]) -> list[LLMMessage]:
    converted = []
    for ui_message in messages:
        text = ui_message_text(ui_message)
        if not text:
            continue
        role = ui_message.get("role")
        if role == "user":
            converted.append(LLMMessage.user(text))
        elif role == "system":
            converted.append(LLMMessage.system(text))
        else:
            converted.append(LLMMessage.assistant(text))
    return converted


def format_history(messages: list[UIMessage], limit: int = 10) -> str:
    lines = [
        f"{m.get('role', 'assistant')}: {ui_message_text(m)}"
        for m in messages[-limit:]
        if ui_message_text(m)
    ]
    return "\n".join(lines) or "(no previous messages)"
