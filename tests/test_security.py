"""Unit tests for app.core.security: bcrypt hashing and JWT issuance/verification."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core import security
from app.core.config import get_settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    """hash_password produces a salted bcrypt hash that verify_password accepts."""

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("secret1")
        self.assertNotEqual(hashed, "secret1")
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("secret1", hashed))

    def test_wrong_password_does_not_verify(self) -> None:
        hashed = hash_password("secret1")
        self.assertFalse(verify_password("secret2", hashed))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("secret1"), hash_password("secret1"))

    def test_garbage_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("secret1", "not-a-bcrypt-hash"))

    def test_production_cost_is_12_rounds(self) -> None:
        original = security.BCRYPT_ROUNDS
        try:
            security.BCRYPT_ROUNDS = 12
            hashed = hash_password("secret1")
        finally:
            security.BCRYPT_ROUNDS = original
        self.assertEqual(hashed.split("$")[2], "12")


class TestAccessTokens(unittest.TestCase):
    """create_access_token / decode_access_token round trip and rejection paths."""

    def test_token_carries_subject_and_expiry(self) -> None:
        now = datetime.now(UTC)
        token = create_access_token(sub=42, expires_minutes=60, now=now)
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "42")
        self.assertEqual(payload["exp"] - payload["iat"], 3600)

    def test_expired_token_raises(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=2)
        token = create_access_token(sub=1, expires_minutes=60, now=past)
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_token_signed_with_other_secret_raises(self) -> None:
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(UTC) + timedelta(hours=1)},
            "some-other-secret",
            algorithm=get_settings().JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token)

    def test_token_without_exp_raises(self) -> None:
        token = jwt.encode(
            {"sub": "1"},
            get_settings().JWT_SECRET.get_secret_value(),
            algorithm=get_settings().JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()
