from .entity import Reservation as Reservation
from .enum import RoomType as RoomType
from .factory import ReservationDetails as ReservationDetails
from .factory import ReservationFactory as ReservationFactory
from .service import StayDatePolicy as StayDatePolicy
from .value_object import ReservationCode as ReservationCode
from .value_object import StayPeriod as StayPeriod
