from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flight_booking.flight.domain.value_object import TravelClass
from flight_booking.reservation.domain.value_object import Passenger, PaymentInfo
from flight_booking.reservation.handlers.dependencies import reservation_system
from flight_booking.reservation.handlers.request_models import BookReservationRequest
from flight_booking.reservation.handlers.response_models import (
    to_reservation_response,
)
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    CapacityError,
    NotFoundError,
)
from flight_booking.shared.utils import api_response, error_response

logger = Logger()

service = reservation_system


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト予約 Lambda Handler

    NotFoundError は 404、CapacityError は 409 として返す。
    """

    logger.info("Received book reservation request")

    try:
        request = BookReservationRequest.model_validate(
            event.json_body if event.body else {}
        )
        passengers = [Passenger(name=p.name) for p in request.passengers]
        payment_info = PaymentInfo(
            payment_method=request.payment_info.payment_method,
            travel_class=TravelClass(request.payment_info.travel_class),
        )
        reservation = service.book_reservation(
            request.flight_id, passengers, payment_info
        )
    except ValidationError as e:
        return error_response(400, "Invalid request", errors=e.errors(include_url=False))
    except NotFoundError as e:
        logger.info("Flight not found", extra={"reason": str(e)})
        return error_response(404, str(e))
    except CapacityError as e:
        logger.info("Not enough seats", extra={"reason": str(e)})
        return error_response(409, str(e))
    except (ValueError, BusinessRuleViolationException) as e:
        return error_response(400, str(e))
    except Exception:
        logger.exception("Failed to book reservation")
        return error_response(500, "Internal server error")

    logger.info(
        "Reservation confirmed",
        extra={
            "reservation_id": str(reservation.id),
            "flight_id": str(reservation.flight.id),
            "seat_count": reservation.seat_count,
        },
    )
    return api_response(201, to_reservation_response(reservation))
