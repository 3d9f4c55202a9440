from fastapi import APIRouter,Depends
from app.controllers.parking_controller import ParkingController,TicketController
from app.models.parking_models import ParkingSpot
from app.schemas.parking_schemas import ParkingSpotCreate,TicketResponse,GenericResponse,VehicleEntryRequest,VehicleExitRequest
from typing import List
from sqlmodel import Session
from app.database import get_db



router = APIRouter()

@router.get("/")
def hello():
    return {"message": "Parking System Management"}

@router.get("/parking/", response_model=List[ParkingSpot])
def read_parking_spots(db:Session = Depends(get_db)):
    return ParkingController.read_parking_spots(db)

@router.post("/parking/", response_model=ParkingSpot)
def create_parking_spot(parking_spot: ParkingSpotCreate,db:Session = Depends(get_db)):
    return ParkingController.create_parking_spot(parking_spot,db)



# VEHICLE ENTRY AND EXIT

@router.post("/vehicle-entry", response_model=GenericResponse)
def create_vehicle_entry(request: VehicleEntryRequest,db:Session = Depends(get_db)):
    return TicketController.create_vehicle_entry(request,db)

@router.post("/vehicle-exit", response_model=GenericResponse)
def post_vehicle_exit(request: VehicleExitRequest, db: Session = Depends(get_db)):
    return TicketController.post_vehicle_exit(request, db)

@router.get("/tickets", response_model=List[TicketResponse])
def get_tickets(db:Session = Depends(get_db)):
    return TicketController.read_tickets(db)
