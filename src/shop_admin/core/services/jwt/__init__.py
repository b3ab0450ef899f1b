from .jwt_service import JwtService

__all__ = ["JwtService"]
