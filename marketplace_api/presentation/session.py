from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class UserSession:
    """Signed-in user as seen by the front end: application user id and bearer token"""
    user_id: Optional[str] = None
    token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id) and bool(self.token)

    def authorization_header(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    @classmethod
    def from_auth_response(cls, payload: Mapping[str, Any]) -> "UserSession":
        """Build a session from the {user, token} body of register/login"""
        user = payload.get("user") or {}
        return cls(user_id=user.get("id"), token=payload.get("token"))
