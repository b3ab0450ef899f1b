"""Issue and verify the HS256 access tokens the API accepts."""

import time

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from loguru import logger

from src.shop_admin.core.errors import UnauthenticatedError
from src.shop_admin.core.security import Principal
from src.shop_admin.runtime.config.config_data import JWTConfig


class JwtService:
    """Generate and verify access tokens signed with a shared secret."""

    def __init__(self, config: JWTConfig) -> None:
        self._config = config

    @property
    def expires_in_seconds(self) -> int:
        return self._config.expires_in_seconds

    def generate_access_token(
        self,
        username: str,
        roles: list[str] | None = None,
        expires_in_seconds: int | None = None,
    ) -> str:
        """Generate a signed access token.

        Args:
            username: Value of the subject (sub) claim
            roles: Role names carried in the ``roles`` claim
            expires_in_seconds: Token lifetime, defaults to the configured lifetime

        Returns:
            Signed JWT string
        """
        now = int(time.time())
        lifetime = (
            self._config.expires_in_seconds
            if expires_in_seconds is None
            else expires_in_seconds
        )
        payload = {
            "iss": self._config.issuer,
            "sub": username,
            "iat": now,
            "nbf": now,
            "exp": now + lifetime,
            "jti": generate_token(16),
            "roles": sorted(roles or []),
        }
        header = {"alg": self._config.algorithm, "typ": "JWT"}
        token = jwt.encode(header, payload, self._config.secret)
        return token.decode() if isinstance(token, bytes) else token

    def verify(self, token: str) -> Principal:
        """Verify signature, issuer and lifetime; return the principal the token names.

        Raises:
            UnauthenticatedError: If the token is malformed, forged or expired
        """
        claims_options = {
            "iss": {"essential": True, "value": self._config.issuer},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }
        try:
            claims = jwt.decode(
                token, self._config.secret, claims_options=claims_options
            )
            claims.validate(leeway=self._config.clock_skew)
        except JoseError as e:
            logger.info("Rejected access token: {}", e)
            raise UnauthenticatedError(detail="Invalid or expired token") from e
        except ValueError as e:
            logger.info("Rejected malformed access token: {}", e)
            raise UnauthenticatedError(detail="Invalid or expired token") from e

        roles = claims.get("roles") or []
        if not isinstance(roles, list):
            raise UnauthenticatedError(detail="Invalid roles claim")
        return Principal(username=str(claims["sub"]), roles=frozenset(roles))
