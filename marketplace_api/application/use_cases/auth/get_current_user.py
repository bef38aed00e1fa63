# Local application imports
from ....core.security import decode_jwt_token
from ...dto.auth_dto import TokenClaims
from ...exceptions import InvalidTokenError


class GetCurrentUserUseCase:
    """
    Use case for resolving the caller from a bearer token.
    
    Tokens are stateless: verification only checks the signature and expiry,
    no user lookup is performed.
    """
    
    async def execute(self, token: str) -> TokenClaims:
        """
        Verify a JWT and return its claims
        
        Raises:
            InvalidTokenError: If token is invalid, expired or lacks claims
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise InvalidTokenError(str(exception))
        
        user_id = payload.get("id")
        if not user_id:
            raise InvalidTokenError("Invalid authentication payload: missing user ID")
        
        return TokenClaims(id=str(user_id), email=payload.get("email", ""))
