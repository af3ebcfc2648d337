"""Unit tests for translating SQLAlchemy errors into storage errors."""

import asyncio

import pytest
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from launchhub_identity.domain.shared.exceptions import (
    ConstraintKind,
    ConstraintViolationError,
    StorageUnavailableError,
)
from launchhub_identity.infrastructure.persistence.sqlalchemy.errors import (
    classify_integrity_error,
    storage_errors,
)


class FakePgError(Exception):
    """Mimics the attributes asyncpg puts on constraint errors."""

    def __init__(self, message, sqlstate, constraint_name=None):
        super().__init__(message)
        self.sqlstate = sqlstate
        self.constraint_name = constraint_name


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, orig)


class TestClassifyIntegrityError:
    @pytest.mark.parametrize(
        ("message", "kind", "constraint"),
        [
            ("UNIQUE constraint failed: users.email", ConstraintKind.UNIQUE, "users.email"),
            (
                "NOT NULL constraint failed: users.password_hash",
                ConstraintKind.NOT_NULL,
                "users.password_hash",
            ),
            ("FOREIGN KEY constraint failed", ConstraintKind.FOREIGN_KEY, None),
            ("CHECK constraint failed: role", ConstraintKind.CHECK, "role"),
        ],
    )
    def test_sqlite_messages(self, message, kind, constraint):
        violation = classify_integrity_error(_integrity(Exception(message)))

        assert violation.kind == kind
        assert violation.constraint == constraint

    def test_postgres_sqlstate_with_constraint_name(self):
        orig = FakePgError(
            'duplicate key value violates unique constraint "uq_users_email"',
            "23505",
            "uq_users_email",
        )

        violation = classify_integrity_error(_integrity(orig))

        assert violation.kind == ConstraintKind.UNIQUE
        assert violation.constraint == "uq_users_email"
        assert violation.involves("email")

    def test_postgres_sqlstate_on_cause(self):
        # SQLAlchemy's asyncpg adapter chains the driver error as __cause__
        wrapper = Exception("wrapped")
        wrapper.__cause__ = FakePgError(
            'insert or update on table "freelancer_profiles" violates foreign key '
            'constraint "fk_freelancer_profiles_user_id_users"',
            "23503",
        )

        violation = classify_integrity_error(_integrity(wrapper))

        assert violation.kind == ConstraintKind.FOREIGN_KEY
        assert violation.constraint == "fk_freelancer_profiles_user_id_users"

    def test_postgres_name_parsed_from_message(self):
        orig = FakePgError(
            'new row for relation "users" violates check constraint "ck_users_role"',
            "23514",
        )

        violation = classify_integrity_error(_integrity(orig))

        assert violation.kind == ConstraintKind.CHECK
        assert violation.constraint == "ck_users_role"

    def test_unknown_message(self):
        violation = classify_integrity_error(_integrity(Exception("something odd")))

        assert violation.kind == ConstraintKind.UNKNOWN


class TestStorageErrors:
    @pytest.mark.asyncio
    async def test_integrity_error_becomes_constraint_violation(self):
        with pytest.raises(ConstraintViolationError) as exc_info:
            async with storage_errors("insert user"):
                raise _integrity(Exception("UNIQUE constraint failed: users.email"))

        assert exc_info.value.kind == ConstraintKind.UNIQUE

    @pytest.mark.asyncio
    async def test_timeout_becomes_storage_unavailable(self):
        with pytest.raises(StorageUnavailableError):
            async with storage_errors("find user"):
                await asyncio.wait_for(asyncio.sleep(1), timeout=0.01)

    @pytest.mark.asyncio
    async def test_operational_error_becomes_storage_unavailable(self):
        with pytest.raises(StorageUnavailableError):
            async with storage_errors("find user"):
                raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    @pytest.mark.asyncio
    async def test_os_error_becomes_storage_unavailable(self):
        with pytest.raises(StorageUnavailableError):
            async with storage_errors("connect"):
                raise ConnectionRefusedError("refused")

    @pytest.mark.asyncio
    async def test_invalidated_connection_becomes_storage_unavailable(self):
        with pytest.raises(StorageUnavailableError):
            async with storage_errors("find user"):
                raise DBAPIError(
                    "SELECT 1",
                    {},
                    Exception("connection reset"),
                    connection_invalidated=True,
                )

    @pytest.mark.asyncio
    async def test_other_dbapi_errors_propagate(self):
        with pytest.raises(DBAPIError):
            async with storage_errors("find user"):
                raise DBAPIError("SELECT 1", {}, Exception("syntax error"))

    @pytest.mark.asyncio
    async def test_unrelated_errors_propagate(self):
        with pytest.raises(KeyError):
            async with storage_errors("find user"):
                raise KeyError("nope")
