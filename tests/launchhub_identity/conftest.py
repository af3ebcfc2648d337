"""
Pytest configuration for launchhub_identity tests.

This conftest provides fixtures specific to the identity domain
(users, freelancer profiles, password hashing).
"""

import pytest

from launchhub_identity.domain.user import User, UserRole
from launchhub_identity.services import PasswordHashingService

# Lowest bcrypt work factor, keeps hashing fast in tests
TEST_HASH_ROUNDS = 4


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def client_user() -> User:
    """An unsaved client account."""
    return User.create("client@example.com", "$2b$04$hash", UserRole.CLIENT)


@pytest.fixture
def freelancer_user() -> User:
    """An unsaved freelancer account."""
    return User.create("freelancer@example.com", "$2b$04$hash", UserRole.FREELANCER)
