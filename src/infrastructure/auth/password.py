"""Password hashing with bcrypt."""

import asyncio

import bcrypt

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """bcrypt hasher with a random per-password salt.

    Hashing is CPU-bound, so both operations run in a worker thread.
    """

    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    async def verify(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        return await asyncio.to_thread(
            bcrypt.checkpw,
            encoded,
            password_hash.encode("utf-8"),
        )
