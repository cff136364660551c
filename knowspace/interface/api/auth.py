"""Request credential helpers."""

from knowspace.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)

AUTH_COOKIE = "auth_token"


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the JWT from a request.

    A ``Bearer`` Authorization header wins over the auth cookie.

    Args:
        authorization: Authorization header value
        auth_token: Auth cookie value

    Returns:
        The token, or None if the request carries none
    """
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


async def authenticate(
    use_case: GetCurrentUserUseCase,
    authorization: str | None,
    auth_token: str | None,
) -> GetCurrentUserResponse:
    """Resolve the caller of a request.

    Raises:
        UnauthorizedError: If there is no valid credential
    """
    token = extract_token(authorization, auth_token)
    return await use_case.execute(GetCurrentUserRequest(token=token))
