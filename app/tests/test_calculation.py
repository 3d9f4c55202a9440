from datetime import datetime, timedelta, timezone
import pytest
from app.config import Config
from app.models.parking_models import ParkingSpot, ParkingType, Ticket
from app.utils.calculation import calculate_fare, format_ticket_times
from app.utils.exceptions import InvalidTimeRange, UnsupportedVehicleType

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_ticket(minutes, parking_type=ParkingType.CAR):
    ticket = Ticket(vehicle_reg_number="ABCDEF", price=0, in_time=NOW - timedelta(minutes=minutes), out_time=NOW)
    ticket.parking_spot = ParkingSpot(id=1, parking_type=parking_type, available=False)
    return ticket


@pytest.mark.parametrize("parking_type,expected_price", [
    (ParkingType.CAR, 1.5),
    (ParkingType.BIKE, 1.0),
])
def test_calculate_fare_one_hour(parking_type, expected_price):
    ticket = make_ticket(60, parking_type)
    calculate_fare(ticket)
    assert ticket.price == pytest.approx(expected_price)


def test_calculate_fare_car_with_discount():
    ticket = make_ticket(60)
    calculate_fare(ticket, discount=True)
    assert ticket.price == pytest.approx(1.425)


@pytest.mark.parametrize("minutes", [0, 20, 30])
@pytest.mark.parametrize("parking_type", [ParkingType.CAR, ParkingType.BIKE])
@pytest.mark.parametrize("discount", [False, True])
def test_calculate_fare_is_free_during_grace_period(minutes, parking_type, discount):
    ticket = make_ticket(minutes, parking_type)
    ticket.price = 99
    calculate_fare(ticket, discount)
    assert ticket.price == 0


@pytest.mark.parametrize("minutes,parking_type", [
    (45, ParkingType.CAR),
    (45, ParkingType.BIKE),
    (24 * 60, ParkingType.CAR),
    (24 * 60, ParkingType.BIKE),
])
def test_calculate_fare_is_proportional_to_duration(minutes, parking_type):
    rate = Config.CAR_RATE_PER_HOUR if parking_type == ParkingType.CAR else Config.BIKE_RATE_PER_HOUR

    ticket = make_ticket(minutes, parking_type)
    calculate_fare(ticket)
    assert ticket.price == pytest.approx(minutes / 60 * rate)

    calculate_fare(ticket, discount=True)
    assert ticket.price == pytest.approx(minutes / 60 * rate * 0.95)


def test_calculate_fare_without_out_time():
    ticket = make_ticket(60)
    ticket.out_time = None
    with pytest.raises(InvalidTimeRange):
        calculate_fare(ticket)


def test_calculate_fare_with_out_time_before_in_time():
    ticket = make_ticket(60)
    ticket.in_time, ticket.out_time = ticket.out_time, ticket.in_time
    with pytest.raises(InvalidTimeRange):
        calculate_fare(ticket)


def test_calculate_fare_unknown_type():
    ticket = make_ticket(60)
    ticket.parking_spot.parking_type = "TRUCK"
    with pytest.raises(UnsupportedVehicleType):
        calculate_fare(ticket)


def test_calculate_fare_mixes_naive_and_aware_times():
    # NAIVE TIMES COME BACK FROM SQLITE AND ARE UTC
    ticket = make_ticket(120)
    ticket.in_time = ticket.in_time.replace(tzinfo=None)
    calculate_fare(ticket)
    assert ticket.price == pytest.approx(3.0)


def test_format_ticket_times_open_ticket():
    formatted_in_time, formatted_out_time = format_ticket_times(NOW)
    assert formatted_in_time
    assert formatted_out_time is None
