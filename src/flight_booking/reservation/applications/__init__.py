from .reservation_system import ReservationSystem as ReservationSystem
