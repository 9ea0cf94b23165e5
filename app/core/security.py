from jose import JWTError, jwt
from app.config import settings
from app.core.exceptions import UnauthorizedException

# Profile claims copied onto the User row on every authenticated request
PROFILE_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using shared SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub' (user_id), 'exp', profile claims

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")

    # jose validates 'exp' only when present
    if payload.get("exp") is None:
        raise UnauthorizedException("Token missing expiration")

    if not payload.get("sub"):
        raise UnauthorizedException("Token missing user identifier")

    return payload


def extract_user_claims(token: str) -> tuple[str, dict]:
    """
    Extract the subject and the profile claims from a JWT.

    Returns:
        (user_id, {claim: value}) with only the profile claims present in the token
    """
    payload = decode_jwt(token)
    profile = {claim: payload[claim] for claim in PROFILE_CLAIMS if claim in payload}
    return str(payload["sub"]), profile
