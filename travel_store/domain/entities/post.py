"""Post domain entities."""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class Comment:
    """Comment embedded in a single post."""
    
    id: str
    post_id: str
    user_id: str
    username: str
    content: str
    created_at: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "postId": self.post_id,
            "userId": self.user_id,
            "username": self.username,
            "content": self.content,
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            id=data["id"],
            post_id=data["postId"],
            user_id=data["userId"],
            username=data["username"],
            content=data["content"],
            created_at=data["createdAt"],
        )


@dataclass
class Post:
    """Domain entity representing a feed post."""
    
    id: str
    user_id: str
    username: str
    content: str
    created_at: str
    image: Optional[str] = None
    likes: List[str] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "content": self.content,
            "createdAt": self.created_at,
            "likes": list(self.likes),
            "comments": [comment.to_dict() for comment in self.comments],
        }
        if self.image is not None:
            data["image"] = self.image
        return data
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            username=data["username"],
            content=data["content"],
            created_at=data["createdAt"],
            image=data.get("image"),
            likes=list(data.get("likes", [])),
            comments=[Comment.from_dict(item) for item in data.get("comments", [])],
        )
