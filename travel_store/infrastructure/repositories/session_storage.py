"""Key-value session storage with lazy expiry."""
import json
import logging
from datetime import datetime
from typing import Callable, Optional

from travel_store.domain.entities.user import Session
from travel_store.domain.interfaces.session_storage import ISessionStorage
from travel_store.domain.interfaces.storage import IKeyValueStorage
from travel_store.utils.identifiers import utc_now, parse_timestamp


class KeyValueSessionStorage(ISessionStorage):
    """
    Single-slot session storage over a key-value storage medium.
    
    The medium has no TTL support in general, so expiry is checked on
    read: an expired session is deleted and reported as absent.
    """
    
    def __init__(
        self,
        storage: IKeyValueStorage,
        key: str = "session",
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the session storage.
        
        Args:
            storage: Storage medium (Dependency Injection)
            key: Storage key holding the session
            clock: Returns the current aware datetime (defaults to UTC now)
        """
        self.storage = storage
        self._key = key
        self._clock = clock or utc_now
        self._logger = logging.getLogger(__name__)
    
    def get_session(self) -> Optional[Session]:
        """Retrieve the session, purging it if it has expired."""
        raw = self.storage.read(self._key)
        if raw is None:
            return None
        
        try:
            session = Session.from_dict(json.loads(raw))
            expires_at = parse_timestamp(session.expires_at)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            self._logger.warning(f"Corrupt session data, ignoring it: {e!r}")
            return None
        
        if self._clock() > expires_at:
            self._logger.info(f"Session for user {session.user_id} expired at {session.expires_at}")
            self.storage.delete(self._key)
            return None
        
        return session
    
    def set_session(self, session: Session) -> None:
        self.storage.write(self._key, json.dumps(session.to_dict()))
        self._logger.debug(f"Session stored for user {session.user_id} until {session.expires_at}")
    
    def delete_session(self) -> None:
        self.storage.delete(self._key)
        self._logger.debug("Session deleted")
