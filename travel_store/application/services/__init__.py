"""Application services."""
from travel_store.application.services.local_store import LocalStore
from travel_store.application.services.authentication_service import AuthenticationService
from travel_store.application.services.engagement_service import EngagementService
from travel_store.application.services.ticket_service import TicketService

__all__ = [
    "LocalStore",
    "AuthenticationService",
    "EngagementService",
    "TicketService",
]
