import logging
from datetime import datetime, timezone
from typing import Optional
from app.controllers.spot_allocator import SpotAllocator
from app.models.parking_models import Ticket
from app.repositories.base import ParkingSpotRepository, TicketRepository
from app.utils.calculation import calculate_fare
from app.utils.exceptions import StorageError, TicketNotFound, TicketWithoutSpot, VehicleAlreadyParked
from app.utils.input_reader import InputReader

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ParkingService:
    """Entry and exit of vehicles, storage goes through the two repositories."""

    def __init__(self, input_reader: InputReader, parking_spot_repository: ParkingSpotRepository,
                 ticket_repository: TicketRepository, clock=None):
        self.input_reader = input_reader
        self.parking_spot_repository = parking_spot_repository
        self.ticket_repository = ticket_repository
        self.spot_allocator = SpotAllocator(parking_spot_repository)
        self.clock = clock or utc_now

    def get_next_parking_number_if_available(self):
        return self.spot_allocator.next_available_spot(self.input_reader.read_selection())

    def is_recurring_user(self, vehicle_reg_number):
        return self.ticket_repository.get_nb_ticket(vehicle_reg_number) > 0

    def process_incoming_vehicle(self) -> Optional[Ticket]:
        parking_spot = self.get_next_parking_number_if_available()
        if parking_spot is None:
            logger.info("Unable to process incoming vehicle, no parking spot available")
            return None

        vehicle_reg_number = self.input_reader.read_vehicle_registration_number()

        open_ticket = self.ticket_repository.get_ticket(vehicle_reg_number)
        if open_ticket is not None and open_ticket.out_time is None:
            raise VehicleAlreadyParked(f"Vehicle '{vehicle_reg_number}' is already parked.")

        parking_spot.available = False
        if not self.parking_spot_repository.update_parking(parking_spot):
            raise StorageError(f"Unable to reserve parking spot {parking_spot.id}")

        if self.is_recurring_user(vehicle_reg_number):
            logger.info("Welcome back! As a recurring user of our parking lot, you'll benefit from a 5% discount.")

        ticket = Ticket(vehicle_reg_number=vehicle_reg_number, price=0, in_time=self.clock(), out_time=None)
        ticket.parking_spot = parking_spot

        if not self.ticket_repository.save_ticket(ticket):
            parking_spot.available = True
            self.parking_spot_repository.update_parking(parking_spot)
            raise StorageError(f"Unable to save ticket for vehicle '{vehicle_reg_number}'")

        logger.info(f"Generated ticket and saved in DB. Please park your vehicle in spot number: {parking_spot.id}")
        logger.info(f"Recorded in-time for vehicle number {vehicle_reg_number} is: {ticket.in_time}")
        return ticket

    def process_exiting_vehicle(self) -> Ticket:
        vehicle_reg_number = self.input_reader.read_vehicle_registration_number()

        ticket = self.ticket_repository.get_ticket(vehicle_reg_number)
        if ticket is None or ticket.out_time is not None:
            raise TicketNotFound(f"No open ticket for vehicle '{vehicle_reg_number}'.")

        parking_spot = ticket.parking_spot
        if parking_spot is None:
            raise TicketWithoutSpot(f"Ticket {ticket.id} for vehicle '{vehicle_reg_number}' has no parking spot.")

        # COUNT PAST VISITS WHILE THIS TICKET IS STILL OPEN
        discount = self.is_recurring_user(vehicle_reg_number)
        ticket.out_time = self.clock()
        calculate_fare(ticket, discount)

        if not self.ticket_repository.update_ticket(ticket):
            logger.error("Unable to update ticket information. Error occurred")
            raise StorageError(f"Unable to update ticket for vehicle '{vehicle_reg_number}'")

        parking_spot.available = True
        if not self.parking_spot_repository.update_parking(parking_spot):
            logger.error(f"Ticket {ticket.id} is closed but parking spot {parking_spot.id} is still marked occupied, release it manually")
            raise StorageError(f"Unable to release parking spot {parking_spot.id}")

        logger.info(f"Please pay the parking fare: {ticket.price:.2f}")
        logger.info(f"Recorded out-time for vehicle number {vehicle_reg_number} is: {ticket.out_time}")
        return ticket
