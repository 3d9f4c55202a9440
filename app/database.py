import os
from sqlmodel import create_engine, SQLModel, Session, select
from sqlalchemy import inspect, text
from dotenv import load_dotenv
import logging
from app.config import Config
from app.models.parking_models import ParkingSpot, ParkingType

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./parking.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


def seed_parking_spots(db: Session):
    # THE LOT STARTS WITH A FIXED SET OF CAR SPOTS FOLLOWED BY BIKE SPOTS
    if db.exec(select(ParkingSpot)).first():
        return
    for _ in range(Config.INITIAL_CAR_SPOTS):
        db.add(ParkingSpot(parking_type=ParkingType.CAR, available=True))
    for _ in range(Config.INITIAL_BIKE_SPOTS):
        db.add(ParkingSpot(parking_type=ParkingType.BIKE, available=True))
    db.commit()
    logger.info("Default parking spots created")


def init_db(bind=None):
    bind = bind or engine
    try:
        inspector = inspect(bind)
        # LIST OF ALL TABLES
        existing_tables = inspector.get_table_names()

        # NO NEED TO CREATE IF IT IS ALREADY EXIST
        if not existing_tables:
            SQLModel.metadata.create_all(bind)
            logger.info("Tables created successfully")
        else:
            logger.info("Tables already exist, skipping creation")

        with Session(bind) as session:
            seed_parking_spots(session)
    except Exception as e:
        logger.error(f"Error in initializing the database: {e}")
        raise


def clear_database_entries(db: Session):
    # BACK TO THE DEFAULT LAYOUT: NO TICKETS, ONLY THE SEEDED SPOTS, ALL FREE
    initial_spots = Config.INITIAL_CAR_SPOTS + Config.INITIAL_BIKE_SPOTS
    try:
        db.execute(text("DELETE FROM ticket"))
        db.execute(text("DELETE FROM parkingspot WHERE id > :initial_spots"), {"initial_spots": initial_spots})
        db.execute(text("UPDATE parkingspot SET available = :available"), {"available": True})
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error while clearing database entries: {e}")
        raise


def get_db():
    try:
        with Session(engine) as session:
            yield session
    except Exception as e:
        logger.error(f"Error during database session: {e}")
        raise
