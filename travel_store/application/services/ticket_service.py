"""Ticket booking paid with coins."""
import logging
from typing import List

from travel_store.application.services.local_store import LocalStore
from travel_store.domain.entities.user import User
from travel_store.domain.entities.ticket import Ticket
from travel_store.domain.exceptions import InsufficientFundsError


logger = logging.getLogger(__name__)


class TicketService:
    """Books and cancels mock travel tickets against the coin ledger."""
    
    def __init__(self, store: LocalStore):
        """
        Initialize ticket service.
        
        Args:
            store: Local store instance (Dependency Injection)
        """
        self.store = store
        self._logger = logging.getLogger(__name__)
    
    def book_ticket(
        self,
        user: User,
        ticket_type: str,
        origin: str,
        destination: str,
        date: str,
        passengers: int = 1,
        price: float = 0
    ) -> Ticket:
        """
        Book a ticket and debit its price from the user's coins.
        
        The balance is checked first; a rejected booking writes neither
        a ticket nor a ledger entry.
        
        Args:
            user: Booking user
            ticket_type: flight, train, bus or hotel
            origin: Departure place
            destination: Arrival place
            date: Travel date
            passengers: Number of passengers
            price: Price in coins
            
        Returns:
            The stored ticket
            
        Raises:
            ValueError: If a required field is blank or invalid
            InsufficientFundsError: If the balance is below the price
        """
        origin = (origin or "").strip()
        destination = (destination or "").strip()
        if not origin or not destination or not date:
            raise ValueError("origin, destination and date are required")
        
        ticket = Ticket(
            id=self.store.new_id("ticket"),
            user_id=user.id,
            username=user.username,
            type=ticket_type,
            origin=origin,
            destination=destination,
            date=date,
            passengers=passengers,
            price=price,
            created_at=self.store.timestamp(),
            status="booked",
        )
        
        balance = self.store.get_user_coin_balance(user.id)
        if balance < price:
            self._logger.warning(f"Booking rejected for {user.id}: balance {balance} < price {price}")
            raise InsufficientFundsError(user.id, balance, price)
        
        self.store.add_ticket(ticket)
        self.store.add_coins(user.id, -price, f"{ticket_type} ticket booked")
        self._logger.info(f"Ticket {ticket.id} booked by {user.id} for {price} coins")
        return ticket
    
    def cancel_ticket(self, ticket_id: str) -> bool:
        """
        Mark a ticket as cancelled. Coins are not refunded.
        
        Returns:
            True if the ticket exists
        """
        return self.store.set_status("tickets", ticket_id, "cancelled")
    
    def tickets_for(self, user_id: str) -> List[Ticket]:
        return [ticket for ticket in self.store.list_tickets() if ticket.user_id == user_id]
