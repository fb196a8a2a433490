"""Itinerary domain entities."""
from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class Destination:
    """Stop on an itinerary; owned by exactly one itinerary."""
    
    id: str
    name: str
    description: str = ""
    date: str = ""
    location: str = ""
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "date": self.date,
            "location": self.location,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Destination":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            date=data.get("date", ""),
            location=data.get("location", ""),
        )


@dataclass
class Itinerary:
    """Domain entity representing a shared travel plan."""
    
    id: str
    user_id: str
    username: str
    title: str
    description: str
    start_date: str
    end_date: str
    created_at: str
    destinations: List[Destination] = field(default_factory=list)
    is_public: bool = True
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "title": self.title,
            "description": self.description,
            "destinations": [destination.to_dict() for destination in self.destinations],
            "startDate": self.start_date,
            "endDate": self.end_date,
            "isPublic": self.is_public,
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Itinerary":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            username=data["username"],
            title=data["title"],
            description=data["description"],
            start_date=data.get("startDate", ""),
            end_date=data.get("endDate", ""),
            created_at=data["createdAt"],
            destinations=[Destination.from_dict(item) for item in data.get("destinations", [])],
            is_public=data.get("isPublic", True),
        )
