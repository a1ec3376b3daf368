from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.reservation.handlers.dependencies import reservation_system
from flight_booking.reservation.handlers.response_models import (
    to_reservation_response,
)
from flight_booking.shared.domain.exception import NotFoundError
from flight_booking.shared.utils import api_response, error_response

logger = Logger()

service = reservation_system


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler"""

    path_params = event.path_parameters or {}
    reservation_id = path_params.get("reservation_id")

    if not reservation_id:
        return error_response(400, "reservation_id is required")

    logger.info("Fetching reservation", extra={"reservation_id": reservation_id})

    try:
        reservation = service.find_reservation(reservation_id)
    except NotFoundError as e:
        return error_response(404, str(e))
    except Exception:
        logger.exception("Failed to fetch reservation")
        return error_response(500, "Internal server error")

    return api_response(200, to_reservation_response(reservation))
