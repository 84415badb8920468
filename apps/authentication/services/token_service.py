"""
Bearer token service (HS256 JWTs signed with the project secret)
"""
from datetime import timedelta
from typing import Optional
import logging

import jwt
from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)


class TokenService:
    """
    Issues and validates access tokens. The ``sub`` claim holds the account id.
    """

    @property
    def secret(self) -> str:
        return settings.JWT_SECRET_KEY

    @property
    def algorithm(self) -> str:
        return settings.JWT_ALGORITHM

    def issue(self, account) -> str:
        """
        Create an access token for the account

        Args:
            account: Account instance

        Returns:
            Encoded JWT
        """
        now = timezone.now()
        payload = {
            'sub': str(account.id),
            'role': account.role,
            'iat': now,
            'exp': now + timedelta(hours=settings.JWT_ACCESS_TOKEN_LIFETIME_HOURS),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[dict]:
        """Return the payload of a valid token, None otherwise."""
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired access token")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected invalid access token: {e}")
        return None

    def validate_bearer_token(self, auth_header: str) -> Optional[dict]:
        """
        Validate Bearer token from Authorization header

        Args:
            auth_header: Authorization header value

        Returns:
            Decoded token payload if valid, None otherwise
        """
        if not auth_header:
            return None

        parts = auth_header.split()

        if len(parts) != 2 or parts[0].lower() != 'bearer':
            logger.warning("Invalid authorization header format")
            return None

        return self.decode(parts[1])

    @staticmethod
    def extract_account_id(token_payload: dict) -> Optional[str]:
        return token_payload.get('sub')


# Singleton instance
token_service = TokenService()
