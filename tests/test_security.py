"""
Unit tests for password hashing and verification.
"""

from backend.core.security import BCRYPT_ROUNDS, get_password_hash, pwd_context, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("s3cret")
        assert hashed != "s3cret"
        assert hashed.startswith("$2b$")

    def test_hash_uses_configured_work_factor(self):
        hashed = get_password_hash("s3cret")
        assert BCRYPT_ROUNDS == 10
        assert hashed.split("$")[2] == "10"
        assert not pwd_context.needs_update(hashed)

    def test_hash_is_salted(self):
        assert get_password_hash("same") != get_password_hash("same")


class TestPasswordVerification:
    def test_matching_password(self):
        hashed = get_password_hash("correct horse")
        assert verify_password("correct horse", hashed) is True

    def test_mismatched_password(self):
        hashed = get_password_hash("correct horse")
        assert verify_password("battery staple", hashed) is False

    def test_malformed_hash_never_matches(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False
