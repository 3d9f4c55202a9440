from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field, Relationship


class ParkingType(str, Enum):
    CAR = "CAR"
    BIKE = "BIKE"


class ParkingSpot(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    parking_type: ParkingType
    available: bool = Field(default=True)


class Ticket(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    vehicle_reg_number: str = Field(index=True)
    parking_spot_id: Optional[int] = Field(default=None, foreign_key="parkingspot.id")
    price: float = Field(default=0)
    in_time: datetime
    out_time: Optional[datetime] = None

    parking_spot: Optional[ParkingSpot] = Relationship()
