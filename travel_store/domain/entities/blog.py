"""Blog domain entities."""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


@dataclass
class BlogComment:
    """Comment embedded in a single blog."""
    
    id: str
    blog_id: str
    user_id: str
    username: str
    content: str
    created_at: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "blogId": self.blog_id,
            "userId": self.user_id,
            "username": self.username,
            "content": self.content,
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BlogComment":
        return cls(
            id=data["id"],
            blog_id=data["blogId"],
            user_id=data["userId"],
            username=data["username"],
            content=data["content"],
            created_at=data["createdAt"],
        )


@dataclass
class Blog:
    """Domain entity representing a long-form travel blog."""
    
    id: str
    user_id: str
    username: str
    title: str
    content: str
    created_at: str
    image: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    likes: List[str] = field(default_factory=list)
    comments: List[BlogComment] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
            "likes": list(self.likes),
            "comments": [comment.to_dict() for comment in self.comments],
            "createdAt": self.created_at,
        }
        if self.image is not None:
            data["image"] = self.image
        return data
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Blog":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            username=data["username"],
            title=data["title"],
            content=data["content"],
            created_at=data["createdAt"],
            image=data.get("image"),
            tags=list(data.get("tags", [])),
            likes=list(data.get("likes", [])),
            comments=[BlogComment.from_dict(item) for item in data.get("comments", [])],
        )
