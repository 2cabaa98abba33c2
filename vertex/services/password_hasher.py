import bcrypt

from vertex.errors import PasswordHashingFailed

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def password_bytes(secret: str) -> bytes:
    return secret.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds=10):
        self.rounds = rounds

    def hash(self, secret: str) -> str:
        """Hash a password with a fresh salt."""
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(password_bytes(secret), salt).decode("utf-8")
        except (TypeError, ValueError, AttributeError) as e:
            raise PasswordHashingFailed(f"Failed to hash password: {e}") from e

    def verify(self, secret: str, hashed: str) -> bool:
        """Verify a password against a stored hash. A mismatch is False, never an error."""
        if not isinstance(secret, str) or not isinstance(hashed, str):
            return False
        try:
            return bcrypt.checkpw(password_bytes(secret), hashed.encode("utf-8"))
        except ValueError:
            return False
