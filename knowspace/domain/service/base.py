"""Base service class for domain services."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import IntegrityError

from knowspace.domain.error import ConstraintConflictError


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities, such as
    comment depth or one reaction per user and target.
    """

    @staticmethod
    @contextmanager
    def conflict_on_duplicate(message: str, **attributes: str) -> Iterator[None]:
        """Translate a uniqueness violation raised by the store.

        Args:
            message: Conflict message returned to the caller
            **attributes: Log attributes identifying the duplicate

        Raises:
            ConstraintConflictError: If the wrapped write hits a unique constraint
        """
        try:
            yield
        except IntegrityError as e:
            logfire.warn("Write rejected by unique constraint", reason=message, **attributes)
            raise ConstraintConflictError(message) from e
