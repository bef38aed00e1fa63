# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.auth_dto import TokenClaims
from ...application.exceptions import InvalidTokenError
from ...di.container import get_container


# Missing credentials are answered with 401 here, not by HTTPBearer
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> TokenClaims:
    """
    FastAPI dependency to get the caller's claims from a bearer token
    
    Args:
        credentials: HTTP Bearer token credentials, if any
        
    Returns:
        TokenClaims with the user id and email
        
    Raises:
        HTTPException: 401 if no token was sent, 403 if it is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not provided",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    
    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except InvalidTokenError as exception:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exception)
        )
