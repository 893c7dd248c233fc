"""
Adapter: bcrypt password hashing.

bcrypt only reads the first 72 bytes of a password, which is why
request schemas cap password length at 72.
"""

import bcrypt

from terra_discover.domain.accounts.ports import PasswordHasher

DEFAULT_ROUNDS = 10


class BcryptPasswordHasherAdapter(PasswordHasher):
    """Implements PasswordHasher with salted bcrypt hashes."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
