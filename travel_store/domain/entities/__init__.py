"""Domain entities - core business objects."""
from travel_store.domain.entities.user import User, Session
from travel_store.domain.entities.coin import CoinEntry
from travel_store.domain.entities.post import Post, Comment
from travel_store.domain.entities.blog import Blog, BlogComment
from travel_store.domain.entities.query import Query, QueryResponse, QUERY_STATUSES
from travel_store.domain.entities.itinerary import Itinerary, Destination
from travel_store.domain.entities.ticket import Ticket, TICKET_TYPES, TICKET_STATUSES

__all__ = [
    "User",
    "Session",
    "CoinEntry",
    "Post",
    "Comment",
    "Blog",
    "BlogComment",
    "Query",
    "QueryResponse",
    "QUERY_STATUSES",
    "Itinerary",
    "Destination",
    "Ticket",
    "TICKET_TYPES",
    "TICKET_STATUSES",
]
