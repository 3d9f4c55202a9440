from datetime import datetime, timezone
from typing import Optional, Tuple
from app.config import Config
from app.models.parking_models import ParkingType, Ticket
from app.utils.exceptions import InvalidTimeRange, UnsupportedVehicleType

PST = Config.get_timezone()

RATE_PER_HOUR = {
    ParkingType.CAR: Config.CAR_RATE_PER_HOUR,
    ParkingType.BIKE: Config.BIKE_RATE_PER_HOUR,
}


def as_utc(moment):
    # SQLITE HANDS BACK NAIVE DATETIMES, THEY WERE STORED AS UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def calculate_fare(ticket: Ticket, discount=False):
    # FIRST HALF HOUR IS FREE, PAST THAT THE WHOLE DURATION IS BILLED
    if ticket.out_time is None:
        raise InvalidTimeRange("Out time provided is incorrect: None")

    in_time_aware = as_utc(ticket.in_time)
    out_time_aware = as_utc(ticket.out_time)

    if out_time_aware < in_time_aware:
        raise InvalidTimeRange(f"Out time provided is incorrect: {ticket.out_time}")

    duration = (out_time_aware - in_time_aware).total_seconds() / Config.SECONDS_PER_HOUR

    if duration <= Config.FREE_PARKING_HOURS:
        ticket.price = 0
        return

    parking_type = ticket.parking_spot.parking_type if ticket.parking_spot else None
    if parking_type not in RATE_PER_HOUR:
        raise UnsupportedVehicleType(f"Unknown parking type: {parking_type}")

    price = duration * RATE_PER_HOUR[parking_type]
    ticket.price = Config.RECURRING_USER_DISCOUNT * price if discount else price


def format_ticket_times(in_time: datetime, out_time: Optional[datetime] = None) -> Tuple[str, Optional[str]]:
    entry_time_pst = as_utc(in_time).astimezone(tz=PST)
    formatted_entry_time = entry_time_pst.strftime("%Y-%m-%d %I:%M %p")

    formatted_exit_time = None
    if out_time:
        exit_time_pst = as_utc(out_time).astimezone(tz=PST)
        formatted_exit_time = exit_time_pst.strftime("%Y-%m-%d %I:%M %p")

    return formatted_entry_time, formatted_exit_time
