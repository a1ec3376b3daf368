from .flight_repository import FlightRepository as FlightRepository
