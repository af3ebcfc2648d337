"""Translation of SQLAlchemy / driver errors into domain storage errors.

Repositories wrap every round-trip in ``storage_errors()`` so that raw
SQLAlchemy exceptions never leave the persistence layer:

- IntegrityError           -> ConstraintViolationError (kind + constraint)
- OperationalError, etc.   -> StorageUnavailableError
- TimeoutError             -> StorageUnavailableError
"""

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from launchhub_identity.domain.shared.exceptions import (
    ConstraintKind,
    ConstraintViolationError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes (class 23: integrity constraint violation)
_SQLSTATE_KINDS = {
    "23505": ConstraintKind.UNIQUE,
    "23502": ConstraintKind.NOT_NULL,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23514": ConstraintKind.CHECK,
}

# SQLite messages, e.g. "UNIQUE constraint failed: users.email"
_SQLITE_PATTERN = re.compile(
    r"(UNIQUE|NOT NULL|FOREIGN KEY|CHECK) constraint failed(?::\s*(?P<target>[\w., ]+))?",
    re.IGNORECASE,
)
_SQLITE_KINDS = {
    "unique": ConstraintKind.UNIQUE,
    "not null": ConstraintKind.NOT_NULL,
    "foreign key": ConstraintKind.FOREIGN_KEY,
    "check": ConstraintKind.CHECK,
}

# PostgreSQL messages, e.g. 'duplicate key value violates unique constraint "uq_users_email"'
_PG_CONSTRAINT_PATTERN = re.compile(r'constraint "(?P<name>[^"]+)"')
_PG_COLUMN_PATTERN = re.compile(r'column "(?P<name>[^"]+)"')


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    return None


def _constraint_name(error: IntegrityError) -> str | None:
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        name = getattr(candidate, "constraint_name", None)
        if name:
            return str(name)
        column = getattr(candidate, "column_name", None)
        if column:
            return str(column)
    return None


def classify_integrity_error(error: IntegrityError) -> ConstraintViolationError:
    """Work out which constraint rejected the write."""
    message = str(error.orig) if error.orig is not None else str(error)
    cause = getattr(error.orig, "__cause__", None)
    if cause is not None:
        message = f"{message} {cause}"

    sqlstate = _sqlstate(error)
    if sqlstate in _SQLSTATE_KINDS:
        constraint = _constraint_name(error)
        if constraint is None:
            match = _PG_CONSTRAINT_PATTERN.search(message) or _PG_COLUMN_PATTERN.search(
                message
            )
            constraint = match.group("name") if match else None
        return ConstraintViolationError(_SQLSTATE_KINDS[sqlstate], constraint)

    match = _SQLITE_PATTERN.search(message)
    if match:
        kind = _SQLITE_KINDS[match.group(1).lower()]
        target = match.group("target")
        return ConstraintViolationError(kind, target.strip() if target else None)

    lowered = message.lower()
    if "unique" in lowered or "duplicate" in lowered:
        kind = ConstraintKind.UNIQUE
    elif "foreign key" in lowered:
        kind = ConstraintKind.FOREIGN_KEY
    elif "null" in lowered:
        kind = ConstraintKind.NOT_NULL
    elif "check" in lowered:
        kind = ConstraintKind.CHECK
    else:
        kind = ConstraintKind.UNKNOWN

    match = _PG_CONSTRAINT_PATTERN.search(message)
    return ConstraintViolationError(kind, match.group("name") if match else None)


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncIterator[None]:
    """Translate storage failures raised inside the block."""
    try:
        yield
    except IntegrityError as e:
        violation = classify_integrity_error(e)
        logger.warning(
            "Constraint violation during %s: %s (%s)",
            operation,
            violation.kind.value,
            violation.constraint,
        )
        raise violation from e
    except (TimeoutError, PoolTimeoutError) as e:
        logger.warning("Storage timed out during %s", operation)
        msg = f"Storage timed out during {operation}"
        raise StorageUnavailableError(msg) from e
    except (OperationalError, InterfaceError) as e:
        logger.warning("Storage unavailable during %s: %s", operation, e)
        msg = f"Storage unavailable during {operation}"
        raise StorageUnavailableError(msg) from e
    except DBAPIError as e:
        if not e.connection_invalidated:
            raise
        logger.warning("Storage connection lost during %s", operation)
        msg = f"Storage connection lost during {operation}"
        raise StorageUnavailableError(msg) from e
    except OSError as e:
        logger.warning("Storage unreachable during %s: %s", operation, e)
        msg = f"Storage unreachable during {operation}"
        raise StorageUnavailableError(msg) from e
