from .reservation_code import ReservationCode
from .stay_period import StayPeriod

__all__ = ["ReservationCode", "StayPeriod"]
