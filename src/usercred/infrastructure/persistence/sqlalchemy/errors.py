"""Translation of driver errors into domain exceptions."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError

from usercred.domain.shared.exceptions import (
    ConstraintViolationError,
    DomainException,
    StoreConnectionError,
)


def _driver_message(exc: DBAPIError) -> str:
    return str(exc.orig) if exc.orig is not None else str(exc)


@contextmanager
def translate_database_errors(**details: Any) -> Iterator[None]:
    """Re-raise SQLAlchemy errors from the wrapped block as domain exceptions.

    ``details`` (offending id, username, ...) is attached to the raised
    exception. Domain exceptions pass through unchanged and anything not
    recognised propagates as-is.
    """
    try:
        yield
    except DomainException:
        raise
    except IntegrityError as exc:
        raise ConstraintViolationError(_driver_message(exc), details=details) from exc
    except (OperationalError, InterfaceError) as exc:
        raise StoreConnectionError(
            f"Database operation failed: {_driver_message(exc)}",
            details=details,
        ) from exc
    except DBAPIError as exc:
        if exc.connection_invalidated:
            raise StoreConnectionError(
                f"Database connection lost: {_driver_message(exc)}",
                details=details,
            ) from exc
        raise
