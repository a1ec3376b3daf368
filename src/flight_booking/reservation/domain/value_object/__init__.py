from .passenger import Passenger as Passenger
from .payment_info import PaymentInfo as PaymentInfo
from .reservation_id import ReservationId as ReservationId
