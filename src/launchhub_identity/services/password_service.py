"""Password hashing service using bcrypt.

Raw passwords never reach the repositories: services hash them here and
the User aggregate only ever carries the resulting hash.
"""

import bcrypt

from launchhub_identity.domain.user.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for salted, slow one-way password hashing.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    MIN_LENGTH = 8
    # bcrypt only considers the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations).
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash. Returns False for malformed hashes."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Not empty, at least 8 characters
        - At most 72 bytes once UTF-8 encoded
        """
        if not password or not isinstance(password, str):
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

