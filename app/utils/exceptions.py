class ParkingError(Exception):
    """Base class for every parking domain failure."""


class InvalidTimeRange(ParkingError, ValueError):
    pass


class UnsupportedVehicleType(ParkingError, ValueError):
    pass


class VehicleAlreadyParked(ParkingError):
    pass


class TicketNotFound(ParkingError):
    pass


class StorageError(ParkingError):
    """Raised when a spot or ticket could not be written to storage."""


class TicketWithoutSpot(ParkingError):
    pass
