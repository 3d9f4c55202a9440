from typing import Optional, Protocol
from app.models.parking_models import ParkingSpot, ParkingType, Ticket


class ParkingSpotRepository(Protocol):
    def get_next_available_slot(self, parking_type: ParkingType) -> Optional[int]:
        ...

    def update_parking(self, parking_spot: ParkingSpot) -> bool:
        ...


class TicketRepository(Protocol):
    def save_ticket(self, ticket: Ticket) -> bool:
        ...

    def get_ticket(self, vehicle_reg_number: str) -> Optional[Ticket]:
        ...

    def update_ticket(self, ticket: Ticket) -> bool:
        ...

    def get_nb_ticket(self, vehicle_reg_number: str) -> int:
        ...
