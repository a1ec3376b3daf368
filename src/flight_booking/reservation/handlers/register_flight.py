from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flight_booking.flight.domain.factory import FlightDetails, FlightFactory
from flight_booking.reservation.handlers.dependencies import reservation_system
from flight_booking.reservation.handlers.request_models import RegisterFlightRequest
from flight_booking.reservation.handlers.response_models import to_flight_response
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
)
from flight_booking.shared.utils import api_response, error_response

logger = Logger()

factory = FlightFactory()
service = reservation_system


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト登録 Lambda Handler"""

    logger.info("Received register flight request")

    try:
        request = RegisterFlightRequest.model_validate(
            event.json_body if event.body else {}
        )
        flight = factory.create(_to_flight_details(request))
        service.register_flight(flight)
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))
    except (ValueError, BusinessRuleViolationException) as e:
        return error_response(400, str(e))
    except DuplicateResourceException as e:
        logger.info("Duplicate flight rejected", extra={"reason": str(e)})
        return error_response(409, str(e))
    except Exception:
        logger.exception("Failed to register flight")
        return error_response(500, "Internal server error")

    logger.info("Registered flight", extra={"flight_id": str(flight.id)})
    return api_response(201, to_flight_response(flight))


def _to_flight_details(request: RegisterFlightRequest) -> FlightDetails:
    """リクエストボディから FlightDetails を構築する"""

    return {
        "flight_id": request.flight_id,
        "origin": request.origin,
        "destination": request.destination,
        "departure_time": request.departure_time,
        "arrival_time": request.arrival_time,
        "airline": request.airline,
        "seats": request.seats,
    }
