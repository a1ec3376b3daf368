from .airport_code import AirportCode as AirportCode
from .iso_date_time import IsoDateTime as IsoDateTime
