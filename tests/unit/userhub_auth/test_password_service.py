"""Unit tests for PasswordHashingService."""

import pytest

from userhub_auth.exceptions import WeakPasswordError
from userhub_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        hashed = self.service.hash("secure_password123")

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) == 60

    def test_verify_correct_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True

    def test_verify_incorrect_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_hash_produces_different_hashes(self):
        hash1 = self.service.hash("same_password")
        hash2 = self.service.hash("same_password")

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        assert self.service.verify("same_password", hash1)
        assert self.service.verify("same_password", hash2)


class TestPasswordValidation:
    """Tests for password strength validation."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_empty_password_rejected(self):
        with pytest.raises(WeakPasswordError, match="empty"):
            self.service.hash("")

    def test_short_password_rejected(self):
        with pytest.raises(WeakPasswordError, match="at least 6"):
            self.service.hash("12345")

    def test_minimum_length_accepted(self):
        self.service.validate_strength("123456")

    def test_password_over_72_bytes_rejected(self):
        # 37 two-byte characters = 74 bytes
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.hash("é" * 37)

    def test_password_of_72_bytes_accepted(self):
        self.service.validate_strength("a" * 72)
