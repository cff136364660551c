"""Request parsing helpers shared by the use cases."""

from uuid import UUID

from knowspace.domain.error import InvalidInputError


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier coming from a request.

    Raises:
        InvalidInputError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid {field}: {value!r}")


def parse_optional_uuid(value: str | None, field: str) -> UUID | None:
    """Parse an optional identifier; empty values mean absent."""
    return parse_uuid(value, field) if value else None
