from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flight_booking.reservation.handlers.dependencies import reservation_system
from flight_booking.reservation.handlers.request_models import SearchFlightsRequest
from flight_booking.reservation.handlers.response_models import (
    to_flight_list_response,
)
from flight_booking.shared.utils import api_response, error_response

logger = Logger()

service = reservation_system


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト検索 Lambda Handler"""

    params = event.query_string_parameters or {}
    logger.info("Searching flights", extra={"query": params})

    try:
        request = SearchFlightsRequest.model_validate(params)
        flights = service.search_flights(
            origin=request.origin,
            destination=request.destination,
            departure_date=request.departure_date,
            return_date=request.return_date,
            passenger_count=request.passengers,
            travel_class=request.travel_class,
        )
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))
    except ValueError as e:
        return error_response(400, str(e))
    except Exception:
        logger.exception("Failed to search flights")
        return error_response(500, "Internal server error")

    return api_response(200, to_flight_list_response(flights))
