import asyncio
import logging
import re

from qwery.domain.llm_providers.llm_types import LLMClient
from qwery.domain.model.agent.conversation import DEFAULT_CONVERSATION_TITLE

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 60
DEFAULT_TITLE_TIMEOUT = 10.0

_QUOTE_EDGES = re.compile(r"^[\"']|[\"']$")


def build_title_prompt(user_message: str) -> str:
    return (
        "Based on the following user message, generate a concise, descriptive title "
        "for this conversation. The title should be:\n"
        f"- Maximum {MAX_TITLE_LENGTH} characters\n"
        "- Clear and specific to the user's intent\n"
        "- Not include quotes or special formatting\n"
        "- Be a noun phrase or short sentence\n\n"
        f'User message: "{user_message}"\n\n'
        "Generate only the title, nothing else:"
    )


def clean_title(raw: str) -> str:
    return _QUOTE_EDGES.sub("", raw.strip()).strip()[:MAX_TITLE_LENGTH]


class ConversationTitleService:
    """Names a conversation after its first user message."""

    def __init__(self, llm: LLMClient, timeout: float = DEFAULT_TITLE_TIMEOUT) -> None:
        self._llm = llm
        self._timeout = timeout

    async def generate(self, user_message: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._llm.ainvoke(build_title_prompt(user_message)),
                timeout=self._timeout,
            )
        except TimeoutError:
            logger.error(f"Title generation timeout after {self._timeout} seconds")
            return DEFAULT_CONVERSATION_TITLE
        except Exception as e:
            logger.error(f"Title generation failed: {e}")
            return DEFAULT_CONVERSATION_TITLE

        return clean_title(response.text or "") or DEFAULT_CONVERSATION_TITLE
