"""Ticket booking domain entity."""
from dataclasses import dataclass
from typing import Dict, Any

TICKET_TYPES = ("flight", "train", "bus", "hotel")
TICKET_STATUSES = ("booked", "cancelled")


@dataclass
class Ticket:
    """
    Domain entity representing a mock travel booking paid in coins.
    
    ``origin`` and ``destination`` are persisted as ``from`` and ``to``.
    """
    
    id: str
    user_id: str
    username: str
    type: str
    origin: str
    destination: str
    date: str
    passengers: int
    price: float
    created_at: str
    status: str = "booked"  # booked, cancelled
    
    def __post_init__(self):
        """Validate ticket entity."""
        if self.type not in TICKET_TYPES:
            raise ValueError(f"Invalid ticket type: {self.type}")
        if self.status not in TICKET_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.passengers <= 0:
            raise ValueError("passengers must be positive")
        if self.price < 0:
            raise ValueError("price must be non-negative")
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "type": self.type,
            "from": self.origin,
            "to": self.destination,
            "date": self.date,
            "passengers": self.passengers,
            "price": self.price,
            "status": self.status,
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ticket":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            username=data["username"],
            type=data["type"],
            origin=data["from"],
            destination=data["to"],
            date=data["date"],
            passengers=data["passengers"],
            price=data["price"],
            created_at=data["createdAt"],
            status=data.get("status", "booked"),
        )
