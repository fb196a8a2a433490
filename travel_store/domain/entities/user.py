"""User and session domain entities."""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class User:
    """Domain entity representing a registered traveler."""
    
    id: str
    username: str
    email: str
    created_at: str
    avatar: Optional[str] = None
    
    def __post_init__(self):
        """Validate user entity."""
        if not self.id:
            raise ValueError("id is required")
        if not self.email:
            raise ValueError("email is required")
    
    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "createdAt": self.created_at,
        }
        if self.avatar is not None:
            data["avatar"] = self.avatar
        return data
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            username=data["username"],
            email=data["email"],
            created_at=data["createdAt"],
            avatar=data.get("avatar"),
        )


@dataclass
class Session:
    """
    Domain entity representing the single active client session.
    
    ``username`` and ``email`` are copied from the user when the session
    is created and are not refreshed afterwards.
    """
    
    user_id: str
    username: str
    email: str
    token: str
    expires_at: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "username": self.username,
            "email": self.email,
            "token": self.token,
            "expiresAt": self.expires_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        return cls(
            user_id=data["userId"],
            username=data["username"],
            email=data["email"],
            token=data["token"],
            expires_at=data["expiresAt"],
        )
