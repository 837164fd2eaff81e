from fastapi import Request, HTTPException, status
from schemas import Caller
from utils.jwt import get_caller_from_token


async def get_caller(request: Request) -> Caller:
    """
    Resolve the caller from the Authorization header

    A request without the header is anonymous; the task service decides
    what anonymous callers may do.

    Args:
        request: FastAPI request object

    Returns:
        Caller for this request

    Raises:
        HTTPException: If the header is malformed or the token is invalid or expired
    """
    auth_header = request.headers.get("Authorization")

    if not auth_header:
        return Caller()

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format. Expected: Bearer <token>"
        )

    caller = get_caller_from_token(parts[1])

    if not caller:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        )

    return caller
