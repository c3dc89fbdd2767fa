"""
Authentication dependencies for FastAPI routes.

The token is only extracted here; resolving it is left to the services so
that request validation can run before authentication.
"""

from fastapi import Header

from receitas.services.session_issuer import token_from_header


async def get_bearer_token(
    authorization: str | None = Header(
        None, description="Session token, optionally prefixed with 'Bearer '"
    ),
) -> str | None:
    """Token from the ``Authorization`` header, or None when absent."""
    return token_from_header(authorization)
