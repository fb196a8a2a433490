"""Domain exceptions raised by the store and its services."""


class TravelStoreError(Exception):
    """Base class for all store errors."""


class InsufficientFundsError(TravelStoreError):
    """Raised when a user's coin balance cannot cover a purchase."""
    
    def __init__(self, user_id: str, balance: float, price: float):
        self.user_id = user_id
        self.balance = balance
        self.price = price
        super().__init__(
            f"Insufficient coins for user {user_id}: balance {balance}, price {price}"
        )


class InvalidStatusTransitionError(TravelStoreError):
    """Raised when a status change would leave a terminal state."""
    
    def __init__(self, collection_name: str, entry_id: str, current: str, requested: str):
        self.collection_name = collection_name
        self.entry_id = entry_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Cannot move {collection_name} entry {entry_id} from {current!r} to {requested!r}"
        )


class FileReadError(TravelStoreError):
    """Raised when a file cannot be read for data-URL encoding."""


class UserAlreadyExistsError(TravelStoreError):
    """Raised on signup when the email is already registered."""
    
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email {email} already exists")


class CorruptCollectionError(TravelStoreError):
    """Raised when a stored collection cannot be decoded for a read-modify-write."""
    
    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Refusing to rewrite {key}: stored data is unreadable ({reason})")
