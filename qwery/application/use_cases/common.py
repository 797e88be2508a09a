"""Helpers shared by the CRUD use-cases."""

from qwery.domain.exceptions.code import CodeDescription
from qwery.domain.shared_kernel import DomainException


def not_found(
    code: CodeDescription, entity: str, value: str, key: str = "id"
) -> DomainException:
    """
    Build the "<Entity> with <key> '<value>' not found" error.

    ``data`` carries the lookup value under ``<entity>_<key>``, e.g.
    ``{"notebook_id": "..."}``.
    """
    return DomainException.new(
        code,
        override_message=f"{entity} with {key} '{value}' not found",
        data={f"{entity.lower()}_{key}": value},
    )
