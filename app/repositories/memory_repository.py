from typing import Dict, Iterable, List, Optional
from app.models.parking_models import ParkingSpot, ParkingType, Ticket


class InMemoryParkingSpotRepository:
    def __init__(self, spots: Iterable[ParkingSpot] = ()):
        self.spots: Dict[int, ParkingSpot] = {spot.id: spot for spot in spots}

    def get_next_available_slot(self, parking_type: ParkingType):
        free_ids = [
            spot_id for spot_id, spot in self.spots.items()
            if spot.parking_type == parking_type and spot.available
        ]
        return min(free_ids) if free_ids else None

    def update_parking(self, parking_spot: ParkingSpot):
        stored_spot = self.spots.get(parking_spot.id)
        if stored_spot is None:
            return False
        stored_spot.available = parking_spot.available
        return True


class InMemoryTicketRepository:
    def __init__(self, parking_spot_repository: Optional[InMemoryParkingSpotRepository] = None):
        self.parking_spot_repository = parking_spot_repository
        self.tickets: List[Ticket] = []

    def save_ticket(self, ticket: Ticket):
        if self.parking_spot_repository and ticket.parking_spot is not None:
            stored_spot = self.parking_spot_repository.spots.get(ticket.parking_spot.id)
            if stored_spot is not None:
                ticket.parking_spot = stored_spot
        ticket.id = len(self.tickets) + 1
        self.tickets.append(ticket)
        return True

    def get_ticket(self, vehicle_reg_number: str):
        matching = [ticket for ticket in self.tickets if ticket.vehicle_reg_number == vehicle_reg_number]
        if not matching:
            return None
        return max(matching, key=lambda ticket: (ticket.in_time, ticket.id))

    def update_ticket(self, ticket: Ticket):
        return any(stored is ticket for stored in self.tickets)

    def get_nb_ticket(self, vehicle_reg_number: str):
        return sum(
            1 for ticket in self.tickets
            if ticket.vehicle_reg_number == vehicle_reg_number and ticket.out_time is not None
        )
