"""Authentication service for the local traveler store."""
import logging
from typing import Optional

from travel_store.application.services.local_store import LocalStore
from travel_store.domain.entities.user import User
from travel_store.domain.exceptions import UserAlreadyExistsError


logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Service for handling sign-up, login and logout.
    
    Identity is the email address. Passwords are accepted but not
    stored or verified: any password logs into an existing account.
    """
    
    def __init__(self, store: LocalStore):
        """
        Initialize authentication service.
        
        Args:
            store: Local store instance (Dependency Injection)
        """
        self.store = store
        self._logger = logging.getLogger(__name__)
    
    def signup(self, username: str, email: str, password: str) -> User:
        """
        Register a new user and open a session for them.
        
        Args:
            username: Display name
            email: Unique email address
            password: Ignored
            
        Returns:
            The created user
            
        Raises:
            ValueError: If username or email is blank
            UserAlreadyExistsError: If the email is already registered
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email:
            raise ValueError("username and email are required")
        
        if self.store.get_user_by_email(email):
            self._logger.warning(f"Signup rejected, email already registered: {email}")
            raise UserAlreadyExistsError(email)
        
        user = User(
            id=self.store.new_id("user"),
            username=username,
            email=email,
            created_at=self.store.timestamp(),
        )
        self.store.save_user(user)
        self.store.create_session(user)
        self._logger.info(f"Account created for {username} ({user.id})")
        return user
    
    def login(self, email: str, password: str) -> Optional[User]:
        """
        Log in an existing user.
        
        Args:
            email: Registered email address
            password: Ignored
            
        Returns:
            The user, or None if no account uses this email
        """
        user = self.store.get_user_by_email((email or "").strip())
        if user is None:
            self._logger.info(f"Login failed for {email}")
            return None
        
        self.store.create_session(user)
        self._logger.info(f"User {user.username} logged in")
        return user
    
    def logout(self) -> None:
        """Clear the current session."""
        self.store.clear_session()
        self._logger.info("Logged out")
    
    def current_user(self) -> Optional[User]:
        """
        Get the logged-in user from the session.
        
        Falls back to the session's own snapshot when the user record
        is missing from the users collection.
        
        Returns:
            User or None if there is no live session
        """
        session = self.store.get_session()
        if session is None:
            return None
        
        user = self.store.get_user_by_id(session.user_id)
        if user is not None:
            return user
        
        return User(
            id=session.user_id,
            username=session.username,
            email=session.email,
            created_at=self.store.timestamp(),
        )
    
    def is_authenticated(self) -> bool:
        """Check whether a live session exists."""
        return self.store.get_session() is not None
