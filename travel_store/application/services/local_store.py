"""Local Store facade - the single authority for durable state.

Exposes typed accessors per collection (users, posts, blogs, queries,
itineraries, tickets, coin ledger) plus the single-slot session, all on
top of one injected key-value storage medium.
"""
import dataclasses
import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional, Tuple

from travel_store.domain.entities import (
    User,
    Session,
    CoinEntry,
    Post,
    Comment,
    Blog,
    BlogComment,
    Query,
    QueryResponse,
    QUERY_STATUSES,
    Itinerary,
    Destination,
    Ticket,
    TICKET_STATUSES,
)
from travel_store.domain.exceptions import InvalidStatusTransitionError
from travel_store.domain.interfaces.storage import IKeyValueStorage
from travel_store.domain.interfaces.session_storage import ISessionStorage
from travel_store.infrastructure.repositories.collection_repository import CollectionRepository
from travel_store.infrastructure.repositories.session_storage import KeyValueSessionStorage
from travel_store.infrastructure.file_encoder import (
    FileSource,
    content_key,
    encode_data_url,
    guess_mime_type,
    read_file_bytes,
)
from travel_store.utils.identifiers import generate_id, utc_now, format_timestamp


DEFAULT_SESSION_TTL = timedelta(days=7)

# Collections whose records carry a ``likes`` list
LIKEABLE = ("posts", "blogs")

# collection -> (embedded list attribute, child type)
CHILDREN: Dict[str, Tuple[str, type]] = {
    "posts": ("comments", Comment),
    "blogs": ("comments", BlogComment),
    "queries": ("responses", QueryResponse),
    "itineraries": ("destinations", Destination),
}

# collection -> (legal statuses, terminal status)
STATUSES: Dict[str, Tuple[Tuple[str, ...], str]] = {
    "queries": (QUERY_STATUSES, "resolved"),
    "tickets": (TICKET_STATUSES, "cancelled"),
}


class LocalStore:
    """
    Key-value persistence facade for the traveler platform.

    Every call is synchronous and writes at most one collection, always
    in a single storage write. There are no cross-collection transactions.
    Mutations that target a missing record are silent no-ops.
    """

    def __init__(
        self,
        storage: IKeyValueStorage,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        enforce_one_way_status: bool = False,
        cache_files: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
        session_storage: Optional[ISessionStorage] = None
    ):
        """
        Initialize the store.

        Args:
            storage: Storage medium (Dependency Injection)
            session_ttl: Lifetime of a new session
            enforce_one_way_status: Reject status changes out of a terminal state
            cache_files: Also store encoded files under content-addressed keys
            clock: Returns the current aware datetime (defaults to UTC now)
            session_storage: Session slot implementation (defaults to one over ``storage``)
        """
        self.storage = storage
        self.session_ttl = session_ttl
        self.enforce_one_way_status = enforce_one_way_status
        self.cache_files = cache_files
        self._clock = clock or utc_now
        self._logger = logging.getLogger(__name__)

        self.users = CollectionRepository(storage, "users", User.from_dict, User.to_dict, prepend=False)
        self.posts = CollectionRepository(storage, "posts", Post.from_dict, Post.to_dict)
        self.blogs = CollectionRepository(storage, "blogs", Blog.from_dict, Blog.to_dict)
        self.queries = CollectionRepository(storage, "queries", Query.from_dict, Query.to_dict)
        self.itineraries = CollectionRepository(storage, "itineraries", Itinerary.from_dict, Itinerary.to_dict)
        self.tickets = CollectionRepository(storage, "tickets", Ticket.from_dict, Ticket.to_dict)
        self.coins = CollectionRepository(storage, "coins", CoinEntry.from_dict, CoinEntry.to_dict, prepend=False)
        self.sessions = session_storage or KeyValueSessionStorage(storage, clock=self._clock)

        self._collections: Dict[str, CollectionRepository] = {
            "users": self.users,
            "posts": self.posts,
            "blogs": self.blogs,
            "queries": self.queries,
            "itineraries": self.itineraries,
            "tickets": self.tickets,
            "coins": self.coins,
        }

    def timestamp(self) -> str:
        """Current time as a persisted ISO-8601 string."""
        return format_timestamp(self._clock())

    def _now_ms(self) -> int:
        return int(self._clock().timestamp() * 1000)

    def new_id(self, prefix: str) -> str:
        """Generate a record id stamped with the store's clock."""
        return generate_id(prefix, now_ms=self._now_ms())

    def collection(self, collection_name: str) -> CollectionRepository:
        """
        Get the repository for a collection name.

        Raises:
            ValueError: If the collection name is unknown
        """
        try:
            return self._collections[collection_name]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection_name}") from None

    # ---- Users ----

    def list_users(self) -> List[User]:
        return self.users.list()

    def save_user(self, user: User) -> None:
        """Replace the user with the same id in place, or append a new one."""
        def upsert(users: List[User]) -> List[User]:
            for index, existing in enumerate(users):
                if existing.id == user.id:
                    users[index] = user
                    return users
            users.append(user)
            return users

        self.users.update(upsert)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.find(lambda user: user.email == email)

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.users.find(lambda user: user.id == user_id)

    # ---- Feed collections ----

    def list_posts(self) -> List[Post]:
        return self.posts.list()

    def add_post(self, post: Post) -> None:
        self.posts.add(post)

    def update_post(self, post_id: str, **changes: Any) -> None:
        """
        Shallow-merge fields into a post.

        Args:
            post_id: Post to update (missing posts are ignored)
            **changes: Dataclass field values to overwrite

        Raises:
            TypeError: If a field name does not exist on Post
        """
        def merge(posts: List[Post]) -> Optional[List[Post]]:
            for index, post in enumerate(posts):
                if post.id == post_id:
                    posts[index] = dataclasses.replace(post, **changes)
                    return posts
            return None

        self.posts.update(merge)

    def list_blogs(self) -> List[Blog]:
        return self.blogs.list()

    def add_blog(self, blog: Blog) -> None:
        self.blogs.add(blog)

    def list_queries(self) -> List[Query]:
        return self.queries.list()

    def add_query(self, query: Query) -> None:
        self.queries.add(query)

    def list_itineraries(self) -> List[Itinerary]:
        return self.itineraries.list()

    def add_itinerary(self, itinerary: Itinerary) -> None:
        self.itineraries.add(itinerary)

    def list_tickets(self) -> List[Ticket]:
        return self.tickets.list()

    def add_ticket(self, ticket: Ticket) -> None:
        self.tickets.add(ticket)

    # ---- Generic mutators ----

    def toggle_like(self, collection_name: str, entry_id: str, user_id: str) -> Optional[List[str]]:
        """
        Add ``user_id`` to an entry's likes, or remove it if already there.

        The collection is written back even when the entry does not exist.

        Args:
            collection_name: "posts" or "blogs"
            entry_id: Record id
            user_id: Liking user

        Returns:
            The entry's likes after the toggle, or None if not found
        """
        if collection_name not in LIKEABLE:
            raise ValueError(f"Collection {collection_name} does not support likes")

        result: Dict[str, List[str]] = {}

        def toggle(records: List[Any]) -> List[Any]:
            for record in records:
                if record.id == entry_id:
                    if user_id in record.likes:
                        record.likes = [liker for liker in record.likes if liker != user_id]
                    else:
                        record.likes.append(user_id)
                    result["likes"] = list(record.likes)
                    break
            else:
                self._logger.debug(f"toggle_like: {entry_id} not found in {collection_name}")
            return records

        self.collection(collection_name).update(toggle)
        return result.get("likes")

    def append_child(self, collection_name: str, parent_id: str, child: Any) -> bool:
        """
        Append an embedded child (comment, response, destination) to its parent.

        Args:
            collection_name: "posts", "blogs", "queries" or "itineraries"
            parent_id: Parent record id
            child: Child record of the type the collection embeds

        Returns:
            True if the parent was found and the child stored

        Raises:
            ValueError: If the collection has no embedded children
            TypeError: If the child has the wrong type for the collection
        """
        if collection_name not in CHILDREN:
            raise ValueError(f"Collection {collection_name} has no embedded children")

        attribute, child_type = CHILDREN[collection_name]
        if not isinstance(child, child_type):
            raise TypeError(
                f"{collection_name} expects {child_type.__name__} children, got {type(child).__name__}"
            )

        def append(records: List[Any]) -> Optional[List[Any]]:
            for record in records:
                if record.id == parent_id:
                    getattr(record, attribute).append(child)
                    return records
            return None

        found = self.collection(collection_name).update(append) is not None
        if not found:
            self._logger.debug(f"append_child: parent {parent_id} not found in {collection_name}")
        return found

    def set_status(self, collection_name: str, entry_id: str, status: str) -> bool:
        """
        Overwrite the status of a query or ticket.

        Args:
            collection_name: "queries" or "tickets"
            entry_id: Record id
            status: New status value

        Returns:
            True if the entry was found and written

        Raises:
            ValueError: If the status is not legal for the collection
            InvalidStatusTransitionError: If one-way transitions are enforced
                and the entry is already in its terminal state
        """
        if collection_name not in STATUSES:
            raise ValueError(f"Collection {collection_name} has no status field")

        allowed, terminal = STATUSES[collection_name]
        if status not in allowed:
            raise ValueError(f"Invalid status for {collection_name}: {status}")

        def overwrite(records: List[Any]) -> Optional[List[Any]]:
            for record in records:
                if record.id == entry_id:
                    if (
                        self.enforce_one_way_status
                        and record.status == terminal
                        and status != terminal
                    ):
                        raise InvalidStatusTransitionError(collection_name, entry_id, record.status, status)
                    record.status = status
                    return records
            return None

        return self.collection(collection_name).update(overwrite) is not None

    # Named shortcuts for the generic mutators

    def like_post(self, post_id: str, user_id: str) -> Optional[List[str]]:
        return self.toggle_like("posts", post_id, user_id)

    def like_blog(self, blog_id: str, user_id: str) -> Optional[List[str]]:
        return self.toggle_like("blogs", blog_id, user_id)

    def add_comment(self, post_id: str, comment: Comment) -> bool:
        return self.append_child("posts", post_id, comment)

    def add_blog_comment(self, blog_id: str, comment: BlogComment) -> bool:
        return self.append_child("blogs", blog_id, comment)

    def add_query_response(self, query_id: str, response: QueryResponse) -> bool:
        return self.append_child("queries", query_id, response)

    def update_query_status(self, query_id: str, status: str) -> bool:
        return self.set_status("queries", query_id, status)

    # ---- Coin ledger ----

    def list_coins(self) -> List[CoinEntry]:
        return self.coins.list()

    def add_coin_entry(self, entry: CoinEntry) -> None:
        self.coins.add(entry)

    def add_coins(self, user_id: str, amount: float, reason: str) -> CoinEntry:
        """
        Append a signed entry to the ledger.

        Args:
            user_id: Ledger owner
            amount: Positive reward or negative spend
            reason: Human-readable description

        Returns:
            The stored ledger entry
        """
        entry = CoinEntry(
            id=self.new_id("coin"),
            user_id=user_id,
            amount=amount,
            reason=reason,
            created_at=self.timestamp(),
        )
        self.add_coin_entry(entry)
        self._logger.info(f"Ledger {user_id}: {amount:+} ({reason})")
        return entry

    def get_user_coin_balance(self, user_id: str) -> float:
        """Sum of all ledger amounts for a user, recomputed on every call."""
        return sum(entry.amount for entry in self.coins.list() if entry.user_id == user_id)

    get_user_coins = get_user_coin_balance

    # ---- Session ----

    def create_session(self, user: User) -> Session:
        """Create the client session for a user, replacing any previous one."""
        now = self._clock()
        session = Session(
            user_id=user.id,
            username=user.username,
            email=user.email,
            token=f"token_{user.id}_{int(now.timestamp() * 1000)}",
            expires_at=format_timestamp(now + self.session_ttl),
        )
        self.sessions.set_session(session)
        self._logger.info(f"Session created for user {user.id}")
        return session

    def get_session(self) -> Optional[Session]:
        return self.sessions.get_session()

    def clear_session(self) -> None:
        self.sessions.delete_session()

    # ---- Files ----

    async def save_file_as_data_url(self, source: FileSource, mime_type: Optional[str] = None) -> str:
        """
        Encode a file as a data URL for embedding in a record's ``image`` field.

        With ``cache_files`` enabled the result is also written under
        ``file_<sha256>``; identical content maps to the same key.

        Args:
            source: File path or raw bytes
            mime_type: Explicit MIME type (guessed from the path when omitted)

        Returns:
            Data URL string

        Raises:
            FileReadError: If the file cannot be read
        """
        data = await read_file_bytes(source)
        data_url = encode_data_url(data, mime_type or guess_mime_type(source))

        if self.cache_files:
            key = content_key(data)
            self.storage.write(key, data_url)
            self._logger.debug(f"Cached file content under {key}")

        return data_url
