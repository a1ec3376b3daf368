from .entity import Flight as Flight
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import FlightRepository as FlightRepository
from .value_object import FlightId as FlightId
from .value_object import SearchCriteria as SearchCriteria
from .value_object import TravelClass as TravelClass
