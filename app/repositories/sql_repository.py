import logging
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, col
from app.models.parking_models import ParkingSpot, ParkingType, Ticket

logger = logging.getLogger(__name__)


class SQLParkingSpotRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_next_available_slot(self, parking_type: ParkingType):
        query = text("SELECT MIN(id) FROM parkingspot WHERE parking_type = :parking_type AND available = :available")
        row = self.db.execute(query, {"parking_type": parking_type.name, "available": True}).fetchone()
        return row[0] if row else None

    def update_parking(self, parking_spot: ParkingSpot):
        try:
            query = text("UPDATE parkingspot SET available = :available WHERE id = :spot_id")
            result = self.db.execute(query, {"available": parking_spot.available, "spot_id": parking_spot.id})
            self.db.commit()
            return result.rowcount == 1
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating parking spot {parking_spot.id}: {e}")
            return False

    def create_spot(self, parking_type: ParkingType):
        new_spot = ParkingSpot(parking_type=parking_type, available=True)
        self.db.add(new_spot)
        self.db.commit()
        self.db.refresh(new_spot)
        return new_spot

    def list_spots(self):
        return list(self.db.exec(select(ParkingSpot).order_by(col(ParkingSpot.id))).all())


class SQLTicketRepository:
    def __init__(self, db: Session):
        self.db = db

    def save_ticket(self, ticket: Ticket):
        try:
            # THE SPOT COMES FROM THE ALLOCATOR, ATTACH THE STORED ROW INSTEAD OF INSERTING IT
            if ticket.parking_spot is not None:
                ticket.parking_spot = self.db.merge(ticket.parking_spot)
            self.db.add(ticket)
            self.db.commit()
            self.db.refresh(ticket)
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving ticket for vehicle {ticket.vehicle_reg_number}: {e}")
            return False

    def get_ticket(self, vehicle_reg_number: str):
        query = (
            select(Ticket)
            .where(Ticket.vehicle_reg_number == vehicle_reg_number)
            .order_by(col(Ticket.in_time).desc(), col(Ticket.id).desc())
        )
        return self.db.exec(query).first()

    def update_ticket(self, ticket: Ticket):
        try:
            self.db.add(ticket)
            self.db.commit()
            self.db.refresh(ticket)
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating ticket {ticket.id}: {e}")
            return False

    def get_nb_ticket(self, vehicle_reg_number: str):
        query = text("SELECT COUNT(*) FROM ticket WHERE vehicle_reg_number = :vehicle_reg_number AND out_time IS NOT NULL")
        return self.db.execute(query, {"vehicle_reg_number": vehicle_reg_number}).scalar_one()

    def list_tickets(self):
        return list(self.db.exec(select(Ticket).order_by(col(Ticket.id))).all())
