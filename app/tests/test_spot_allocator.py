import pytest
from app.controllers.spot_allocator import SpotAllocator, parking_type_for
from app.models.parking_models import ParkingSpot, ParkingType
from app.repositories.memory_repository import InMemoryParkingSpotRepository
from app.utils.exceptions import UnsupportedVehicleType


@pytest.fixture
def spot_repository():
    return InMemoryParkingSpotRepository([
        ParkingSpot(id=1, parking_type=ParkingType.CAR, available=True),
        ParkingSpot(id=2, parking_type=ParkingType.CAR, available=True),
        ParkingSpot(id=3, parking_type=ParkingType.BIKE, available=True),
    ])


@pytest.mark.parametrize("selection,parking_type", [(1, ParkingType.CAR), (2, ParkingType.BIKE)])
def test_parking_type_for(selection, parking_type):
    assert parking_type_for(selection) == parking_type


@pytest.mark.parametrize("selection", [0, 3, -1])
def test_parking_type_for_invalid_selection(selection):
    with pytest.raises(UnsupportedVehicleType):
        parking_type_for(selection)


def test_allocation_skips_unavailable_spot(spot_repository):
    allocator = SpotAllocator(spot_repository)

    spot = allocator.next_available_spot(1)
    assert spot.id == 1

    spot.available = False
    assert spot_repository.update_parking(spot)
    assert allocator.next_available_spot(1).id == 2


def test_released_spot_is_allocated_again(spot_repository):
    allocator = SpotAllocator(spot_repository)
    for spot_id in (1, 2):
        spot_repository.update_parking(ParkingSpot(id=spot_id, parking_type=ParkingType.CAR, available=False))
    assert allocator.next_available_spot(1) is None

    spot_repository.update_parking(ParkingSpot(id=2, parking_type=ParkingType.CAR, available=True))
    assert allocator.next_available_spot(1).id == 2


def test_allocation_is_per_vehicle_type(spot_repository):
    spot = SpotAllocator(spot_repository).next_available_spot(2)
    assert spot.id == 3
    assert spot.parking_type == ParkingType.BIKE


def test_invalid_selection_returns_none(spot_repository):
    assert SpotAllocator(spot_repository).next_available_spot(7) is None
