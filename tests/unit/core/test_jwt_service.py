"""Unit tests for access token issuing and verification."""

import pytest
from authlib.jose import jwt

from src.shop_admin.core.errors import UnauthenticatedError
from src.shop_admin.core.services import JwtService
from src.shop_admin.runtime.config.config_data import JWTConfig
from tests.fixtures.services import TEST_JWT_SECRET


class TestJwtService:
    def test_round_trip_carries_username_and_roles(self, jwt_service):
        token = jwt_service.generate_access_token("alice", ["USER", "ADMIN"])

        principal = jwt_service.verify(token)

        assert principal.username == "alice"
        assert principal.roles == frozenset({"USER", "ADMIN"})
        assert principal.is_admin

    def test_claims(self, jwt_service, jwt_config):
        token = jwt_service.generate_access_token("alice", ["USER"])

        claims = jwt.decode(token, TEST_JWT_SECRET)

        assert claims["iss"] == jwt_config.issuer
        assert claims["sub"] == "alice"
        assert claims["exp"] - claims["iat"] == jwt_config.expires_in_seconds
        assert claims["roles"] == ["USER"]
        assert claims["jti"]

    def test_expired_token(self, jwt_config):
        service = JwtService(jwt_config.model_copy(update={"clock_skew": 0}))
        token = service.generate_access_token("alice", expires_in_seconds=-10)

        with pytest.raises(UnauthenticatedError):
            service.verify(token)

    def test_wrong_secret(self, jwt_service):
        other = JwtService(JWTConfig(secret="another-secret-another-secret-0123", issuer="shop-admin-test"))
        token = other.generate_access_token("alice")

        with pytest.raises(UnauthenticatedError):
            jwt_service.verify(token)

    def test_wrong_issuer(self, jwt_service):
        other = JwtService(JWTConfig(secret=TEST_JWT_SECRET, issuer="someone-else"))
        token = other.generate_access_token("alice")

        with pytest.raises(UnauthenticatedError):
            jwt_service.verify(token)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_malformed_token(self, jwt_service, token):
        with pytest.raises(UnauthenticatedError):
            jwt_service.verify(token)
