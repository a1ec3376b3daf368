import json

from flight_booking.reservation.handlers import register_flight


class TestRegisterFlightHandler:
    def test_register_flight(self, create_event, lambda_context, flight_body, isolated_system):
        response = register_flight.lambda_handler(
            create_event(body=flight_body), lambda_context
        )

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["status"] == "success"
        assert body["data"]["flight_id"] == "F001"
        assert body["data"]["seats"] == {"Economy": 2, "Business": 1}
        assert [str(f.id) for f in isolated_system.list_flights()] == ["F001"]

    def test_duplicate_flight_returns_409(self, create_event, lambda_context, flight_body):
        register_flight.lambda_handler(create_event(body=flight_body), lambda_context)

        response = register_flight.lambda_handler(
            create_event(body=flight_body), lambda_context
        )

        assert response["statusCode"] == 409

    def test_invalid_body_returns_400(self, create_event, lambda_context, flight_body):
        flight_body["origin"] = "NEWYORK"

        response = register_flight.lambda_handler(
            create_event(body=flight_body), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid request"

    def test_negative_seats_returns_400(self, create_event, lambda_context, flight_body):
        flight_body["seats"] = {"Economy": -1}

        response = register_flight.lambda_handler(
            create_event(body=flight_body), lambda_context
        )

        assert response["statusCode"] == 400

    def test_invalid_schedule_returns_400(self, create_event, lambda_context, flight_body):
        flight_body["arrival_time"] = "2023-10-01T09:00:00"

        response = register_flight.lambda_handler(
            create_event(body=flight_body), lambda_context
        )

        assert response["statusCode"] == 400
        assert "Departure time must be before arrival time" in response["body"]

    def test_missing_body_returns_400(self, create_event, lambda_context):
        response = register_flight.lambda_handler(create_event(), lambda_context)

        assert response["statusCode"] == 400
