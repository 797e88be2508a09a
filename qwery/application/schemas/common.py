"""Shared pieces of the request/response models."""


def not_empty(value: str | None) -> str | None:
    """Reject blank strings while letting ``None`` through for optional fields."""
    if value is not None and not value.strip():
        raise ValueError("must not be empty")
    return value
