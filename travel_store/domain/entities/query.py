"""Query (question and answer) domain entities."""
from dataclasses import dataclass, field
from typing import List, Dict, Any

QUERY_STATUSES = ("open", "resolved")


@dataclass
class QueryResponse:
    """Answer embedded in a single query."""
    
    id: str
    query_id: str
    user_id: str
    username: str
    content: str
    created_at: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "queryId": self.query_id,
            "userId": self.user_id,
            "username": self.username,
            "content": self.content,
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QueryResponse":
        return cls(
            id=data["id"],
            query_id=data["queryId"],
            user_id=data["userId"],
            username=data["username"],
            content=data["content"],
            created_at=data["createdAt"],
        )


@dataclass
class Query:
    """Domain entity representing a traveler's question."""
    
    id: str
    user_id: str
    username: str
    title: str
    content: str
    created_at: str
    status: str = "open"  # open, resolved
    responses: List[QueryResponse] = field(default_factory=list)
    
    def __post_init__(self):
        """Validate query entity."""
        if self.status not in QUERY_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "title": self.title,
            "content": self.content,
            "status": self.status,
            "responses": [response.to_dict() for response in self.responses],
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Query":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            username=data["username"],
            title=data["title"],
            content=data["content"],
            created_at=data["createdAt"],
            status=data.get("status", "open"),
            responses=[QueryResponse.from_dict(item) for item in data.get("responses", [])],
        )
