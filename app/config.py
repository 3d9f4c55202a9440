import os
from zoneinfo import ZoneInfo
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECONDS_PER_HOUR = 3600
    TIMEZONE = os.getenv("TIMEZONE", "Asia/Karachi")

    # FARES ARE PER HOUR, FIRST HALF HOUR IS FREE
    CAR_RATE_PER_HOUR = 1.5
    BIKE_RATE_PER_HOUR = 1.0
    FREE_PARKING_HOURS = 0.5
    RECURRING_USER_DISCOUNT = 0.95

    INITIAL_CAR_SPOTS = 3
    INITIAL_BIKE_SPOTS = 2

    @staticmethod
    def get_timezone():
        return ZoneInfo(Config.TIMEZONE)
