from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from qwery.domain.shared_kernel import utcnow


@dataclass(kw_only=True)
class AgentStateSnapshot:
    """Serialized state of a conversational agent, one per conversation."""

    conversation_id: str
    phase: str
    context: dict[str, Any] = field(default_factory=dict)
    updated_at: datetime = field(default_factory=utcnow)
