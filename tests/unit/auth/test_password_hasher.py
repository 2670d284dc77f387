"""Unit tests for the bcrypt password hasher."""

import pytest

from infrastructure.auth.password import PasswordHasher


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum cost keeps the suite fast
    return PasswordHasher(rounds=4)


class TestPasswordHasher:
    @pytest.mark.asyncio
    async def test_hash_is_not_plaintext(self, hasher: PasswordHasher):
        hashed = await hasher.hash("secret123")

        assert hashed != "secret123"
        assert hashed.startswith("$2")

    @pytest.mark.asyncio
    async def test_same_password_gets_distinct_salts(self, hasher: PasswordHasher):
        first = await hasher.hash("secret123")
        second = await hasher.hash("secret123")

        assert first != second

    @pytest.mark.asyncio
    async def test_cost_factor_is_encoded_in_hash(self):
        hashed = await PasswordHasher(rounds=5).hash("secret123")

        assert hashed.split("$")[2] == "05"

    @pytest.mark.asyncio
    async def test_verify_accepts_matching_password(self, hasher: PasswordHasher):
        hashed = await hasher.hash("secret123")

        assert await hasher.verify("secret123", hashed) is True

    @pytest.mark.asyncio
    async def test_verify_rejects_wrong_password(self, hasher: PasswordHasher):
        hashed = await hasher.hash("secret123")

        assert await hasher.verify("secret124", hashed) is False

    @pytest.mark.asyncio
    async def test_verify_rejects_overlong_password(self, hasher: PasswordHasher):
        hashed = await hasher.hash("secret123")

        assert await hasher.verify("x" * 100, hashed) is False
