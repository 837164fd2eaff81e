import jwt
import os
from typing import Optional
from dotenv import load_dotenv
from schemas import Caller

# Load environment variables
load_dotenv()

SECRET_KEY = os.getenv("AUTH_SECRET")
ALGORITHM = "HS256"

if not SECRET_KEY:
    raise ValueError("AUTH_SECRET environment variable is not set")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify JWT token and return payload

    Args:
        token: JWT token string

    Returns:
        Decoded payload if valid, None otherwise
    """
    try:
        # PyJWT rejects expired tokens when an "exp" claim is present
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.InvalidTokenError:
        return None


def get_caller_from_token(token: str) -> Optional[Caller]:
    """
    Build the caller identity from a JWT token

    Args:
        token: JWT token string

    Returns:
        Caller if the token is valid and names a subject, None otherwise
    """
    payload = verify_jwt(token)
    if not payload or not payload.get("sub"):
        return None

    return Caller(
        user_id=str(payload["sub"]),  # Subject is user ID
        username=payload.get("username") or payload.get("name")
    )
