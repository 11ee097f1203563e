"""
Shelter Admin Backend — Password Hashing & Token Tests
========================================================

What:  Unit tests for app.security plus the bearer guard as seen over HTTP.

What we test:
    ✅ Hashes are salted and verify only the original password
    ✅ An unrecognizable stored hash verifies as False instead of raising
    ✅ Tokens round-trip their claims
    ✅ Expired, tampered and foreign-secret tokens are rejected
    ✅ Protected routes answer 401 in the error envelope
"""

import jwt
import pytest

from app.exceptions import AuthenticationError
from app.models.user import User
from app.security import TokenSigner, get_token_signer, hash_password, verify_password
from factories import make_user, seed


class TestPasswordHashing:
    def test_hash_is_salted(self):
        first = hash_password("hunter22")
        second = hash_password("hunter22")
        assert first != second
        assert "hunter22" not in first

    def test_verify_matches_only_original(self):
        stored = hash_password("hunter22")
        assert verify_password("hunter22", stored) is True
        assert verify_password("hunter23", stored) is False

    def test_unknown_hash_format_is_false(self):
        assert verify_password("anything", "not-a-passlib-hash") is False


class TestTokenSigner:
    def setup_method(self):
        self.signer = TokenSigner(secret="unit-test-secret-value", expires_in=600)
        self.user = User(id=7, username="dana", role="staff")

    def test_round_trip_claims(self):
        claims = self.signer.decode(self.signer.issue(self.user))
        assert claims.user_id == 7
        assert claims.username == "dana"
        assert claims.role == "staff"

    def test_expiry_matches_lifetime(self):
        payload = jwt.decode(
            self.signer.issue(self.user), "unit-test-secret-value", algorithms=["HS256"]
        )
        assert payload["exp"] - payload["iat"] == 600
        assert payload["sub"] == "7"

    def test_expired_token(self):
        expired = TokenSigner(secret="unit-test-secret-value", expires_in=-30)
        with pytest.raises(AuthenticationError, match="Token expired"):
            self.signer.decode(expired.issue(self.user))

    def test_foreign_secret_is_invalid(self):
        other = TokenSigner(secret="some-other-secret-value")
        with pytest.raises(AuthenticationError, match="Invalid token"):
            self.signer.decode(other.issue(self.user))

    def test_garbage_is_invalid(self):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            self.signer.decode("not.a.token")

    def test_missing_subject_is_invalid(self):
        token = jwt.encode({"username": "dana", "exp": 9999999999}, "unit-test-secret-value")
        with pytest.raises(AuthenticationError, match="Invalid token"):
            self.signer.decode(token)

    def test_signer_is_cached(self):
        assert get_token_signer() is get_token_signer()


class TestBearerGuard:
    """get_current_user, exercised through a protected route."""

    @pytest.mark.asyncio
    async def test_missing_header(self, client):
        response = await client.get("/pets")
        assert response.status_code == 401
        assert response.json() == {"data": None, "code": 401, "message": "Authentication required"}

    @pytest.mark.asyncio
    async def test_invalid_token(self, client):
        response = await client.get("/pets", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    @pytest.mark.asyncio
    async def test_expired_token(self, client, admin_user):
        signer = TokenSigner(secret="test-secret-for-the-shelter-suite", expires_in=-30)
        response = await client.get(
            "/pets", headers={"Authorization": f"Bearer {signer.issue(admin_user)}"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Token expired"

    @pytest.mark.asyncio
    async def test_deleted_user(self, client):
        ghost = User(id=999, username="ghost", role="staff")
        token = get_token_signer().issue(ghost)
        response = await client.get("/pets", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["message"] == "User no longer exists"

    @pytest.mark.asyncio
    async def test_locked_user(self, client):
        locked = await seed(make_user("frozen", status="locked"))
        token = get_token_signer().issue(locked)
        response = await client.get("/pets", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["message"] == "Account is disabled"

    @pytest.mark.asyncio
    async def test_valid_token(self, auth_client):
        response = await auth_client.get("/pets")
        assert response.status_code == 200
