"""Interface for session storage (Repository Pattern)."""
from abc import ABC, abstractmethod
from typing import Optional

from travel_store.domain.entities.user import Session


class ISessionStorage(ABC):
    """Interface for storing and retrieving the single client session."""
    
    @abstractmethod
    def get_session(self) -> Optional[Session]:
        """
        Retrieve the current session.
        
        Returns:
            Session or None if absent or expired
        """
        pass
    
    @abstractmethod
    def set_session(self, session: Session) -> None:
        """
        Store the session, replacing any previous one.
        
        Args:
            session: Session to store
        """
        pass
    
    @abstractmethod
    def delete_session(self) -> None:
        """Delete the stored session."""
        pass
