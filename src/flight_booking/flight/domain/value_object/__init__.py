from .flight_id import FlightId as FlightId
from .search_criteria import SearchCriteria as SearchCriteria
from .travel_class import TravelClass as TravelClass
