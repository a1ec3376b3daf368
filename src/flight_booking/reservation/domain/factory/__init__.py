from .reservation_factory import ReservationFactory as ReservationFactory
