from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

ToolHandler = Callable[..., Awaitable[Any]]


@dataclass
class Tool:
    """
    A callable capability exposed to the model.

    ``parameters`` is a JSON schema object describing the keyword arguments
    the handler accepts.
    """

    name: str
    handler: ToolHandler
    description: str | None = None
    parameters: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    async def invoke(self, **kwargs: Any) -> Any:
        return await self.handler(**kwargs)

    def to_openai_schema(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description or "",
                "parameters": self.parameters,
            },
        }
