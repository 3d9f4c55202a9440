from sqlmodel import SQLModel, Field
from typing import Optional, Any
from app.models.parking_models import ParkingType

class ParkingSpotCreate(SQLModel):
    parking_type: ParkingType

class ParkingSpotResponse(SQLModel):
    id: Optional[int]
    parking_type: ParkingType
    available: bool

class TicketResponse(SQLModel):
    id: Optional[int]
    vehicle_reg_number: str
    in_time: Optional[str]
    out_time: Optional[str]
    price: float
    parking_spot: Optional[ParkingSpotResponse]

class VehicleEntryRequest(SQLModel):
    # 1 = CAR, 2 = BIKE
    vehicle_type: int = Field(ge=1, le=2)
    vehicle_reg_number: str = Field(min_length=1)

class VehicleExitRequest(SQLModel):
    vehicle_reg_number: str = Field(min_length=1)

class GenericResponse(SQLModel):
    message: Optional[str] = None
    data: Optional[Any] = None
