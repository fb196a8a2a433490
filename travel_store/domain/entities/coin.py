"""Coin ledger domain entity."""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class CoinEntry:
    """
    Domain entity representing one signed entry of the coin ledger.
    
    Positive amounts are rewards, negative amounts are purchases.
    A user's balance is the sum of all of their entries.
    """
    
    id: str
    user_id: str
    amount: float
    reason: str
    created_at: str
    
    def __post_init__(self):
        """Validate coin entry."""
        if not self.user_id:
            raise ValueError("user_id is required")
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "amount": self.amount,
            "reason": self.reason,
            "createdAt": self.created_at,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoinEntry":
        return cls(
            id=data["id"],
            user_id=data["userId"],
            amount=data["amount"],
            reason=data.get("reason", ""),
            created_at=data["createdAt"],
        )
