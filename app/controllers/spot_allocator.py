import logging
from typing import Optional
from app.models.parking_models import ParkingSpot, ParkingType
from app.repositories.base import ParkingSpotRepository
from app.utils.exceptions import UnsupportedVehicleType

logger = logging.getLogger(__name__)

# SELECTION CODES OFFERED TO THE DRIVER
SELECTION_TO_PARKING_TYPE = {
    1: ParkingType.CAR,
    2: ParkingType.BIKE,
}


def parking_type_for(selection: int) -> ParkingType:
    try:
        return SELECTION_TO_PARKING_TYPE[selection]
    except KeyError:
        raise UnsupportedVehicleType(f"Entered input is invalid: {selection}") from None


class SpotAllocator:
    def __init__(self, parking_spot_repository: ParkingSpotRepository):
        self.parking_spot_repository = parking_spot_repository

    def next_available_spot(self, selection: int) -> Optional[ParkingSpot]:
        try:
            parking_type = parking_type_for(selection)
        except UnsupportedVehicleType as e:
            logger.error(f"Error parsing user input for type of vehicle: {e}")
            return None

        parking_number = self.parking_spot_repository.get_next_available_slot(parking_type)
        if not parking_number or parking_number <= 0:
            logger.info(f"No {parking_type.value} spot available, parking slots might be full")
            return None

        return ParkingSpot(id=parking_number, parking_type=parking_type, available=True)
