from sqlmodel import Session
from fastapi import HTTPException
from app.controllers.parking_service import ParkingService
from app.models.parking_models import Ticket
from app.repositories.sql_repository import SQLParkingSpotRepository, SQLTicketRepository
from app.schemas.parking_schemas import (ParkingSpotCreate, ParkingSpotResponse, TicketResponse,
                                         VehicleEntryRequest, VehicleExitRequest, GenericResponse)
from app.utils.calculation import format_ticket_times
from app.utils.exceptions import (InvalidTimeRange, StorageError, TicketNotFound,
                                  UnsupportedVehicleType, VehicleAlreadyParked)
from app.utils.input_reader import RequestInputReader


def build_parking_service(input_reader: RequestInputReader, db: Session) -> ParkingService:
    return ParkingService(input_reader, SQLParkingSpotRepository(db), SQLTicketRepository(db))


def to_ticket_response(ticket: Ticket) -> TicketResponse:
    formatted_in_time, formatted_out_time = format_ticket_times(ticket.in_time, ticket.out_time)
    parking_spot = ticket.parking_spot
    return TicketResponse(
        id=ticket.id,
        vehicle_reg_number=ticket.vehicle_reg_number,
        in_time=formatted_in_time,
        out_time=formatted_out_time,
        price=round(ticket.price, 2),
        parking_spot=ParkingSpotResponse(
            id=parking_spot.id,
            parking_type=parking_spot.parking_type,
            available=parking_spot.available
        ) if parking_spot else None
    )


class ParkingController:
    @staticmethod
    def create_parking_spot(parking_spot: ParkingSpotCreate, db: Session):
        try:
            return SQLParkingSpotRepository(db).create_spot(parking_spot.parking_type)
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Internal server error while creating parking spot:{e}")

    @staticmethod
    def read_parking_spots(db: Session):
        try:
            return SQLParkingSpotRepository(db).list_spots()
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"An error occured in read_parking_spots:{e} ")


class TicketController:
    @staticmethod
    def create_vehicle_entry(request: VehicleEntryRequest, db: Session) -> GenericResponse:
        try:
            input_reader = RequestInputReader(request.vehicle_reg_number, request.vehicle_type)
            ticket = build_parking_service(input_reader, db).process_incoming_vehicle()

            if ticket is None:
                raise HTTPException(status_code=409, detail="No parking spot available for this vehicle type. Please try again later.")

            return GenericResponse(
                message=f"Please park your vehicle '{ticket.vehicle_reg_number}' in spot number {ticket.parking_spot.id}.",
                data=to_ticket_response(ticket)
            )

        # THIS EXCEPT BLOCK RERAISED HTTPException LIKE (No parking spot available)
        except HTTPException as http_exc:
            raise http_exc

        except (VehicleAlreadyParked, UnsupportedVehicleType, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Internal server error while processing vehicle entry: {e}")

    @staticmethod
    def post_vehicle_exit(request: VehicleExitRequest, db: Session) -> GenericResponse:
        try:
            input_reader = RequestInputReader(request.vehicle_reg_number)
            ticket = build_parking_service(input_reader, db).process_exiting_vehicle()

            return GenericResponse(
                message=f"Vehicle '{ticket.vehicle_reg_number}' has successfully exited from spot {ticket.parking_spot.id}. The parking fare is {ticket.price:.2f}.",
                data=to_ticket_response(ticket)
            )

        except TicketNotFound as e:
            raise HTTPException(status_code=404, detail=f"{e} Please check the vehicle number and try again.")

        except StorageError as e:
            raise HTTPException(status_code=500, detail=f"Unable to update ticket information: {e}")

        except (InvalidTimeRange, UnsupportedVehicleType, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        except Exception as e:
            raise HTTPException(status_code=500, detail=f"An error occured {e}")

    @staticmethod
    def read_tickets(db: Session):
        try:
            return [to_ticket_response(ticket) for ticket in SQLTicketRepository(db).list_tickets()]
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"An error occured in read_tickets: {e}")
