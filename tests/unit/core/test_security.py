"""Password hashing tests."""

import pytest

from src.bookshelf.core.security import (
    generate_secure_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_then_verify(self):
        encoded = hash_password("correct horse", iterations=1000)

        assert encoded.startswith("pbkdf2_sha256$1000$")
        assert verify_password("correct horse", encoded) is True
        assert verify_password("wrong horse", encoded) is False

    def test_random_salt_per_hash(self):
        """The same password hashes differently each time."""
        assert hash_password("pw", iterations=1000) != hash_password("pw", iterations=1000)

    def test_fixed_salt_is_deterministic(self):
        first = hash_password("pw", iterations=1000, salt="abc")
        second = hash_password("pw", iterations=1000, salt="abc")

        assert first == second

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            hash_password("")

    def test_salt_with_separator_rejected(self):
        with pytest.raises(ValueError):
            hash_password("pw", salt="a$b")

    @pytest.mark.parametrize(
        "encoded",
        [
            "",
            "not-a-hash",
            "md5$1000$salt$digest",
            "pbkdf2_sha256$abc$salt$digest",
            "pbkdf2_sha256$0$salt$digest",
        ],
    )
    def test_malformed_hash_never_verifies(self, encoded):
        assert verify_password("pw", encoded) is False


def test_generate_secure_token_is_url_safe():
    token = generate_secure_token()

    assert len(token) >= 32
    assert "=" not in token
    assert "+" not in token and "/" not in token
    assert generate_secure_token() != token
