from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.client.applications.register_client import (
    RegisterClientService,
)
from hotel_reservation.client.domain.factory import ClientDetails, ClientFactory
from hotel_reservation.reservation.applications.make_reservation import (
    MakeReservationService,
)
from hotel_reservation.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from hotel_reservation.reservation.handlers.request_models import (
    MakeReservationRequest,
)
from hotel_reservation.reservation.handlers.response_models import (
    to_error_response,
    to_response,
)
from hotel_reservation.shared.domain import DomainException, SequenceCounter
from hotel_reservation.shared.utils import get_logger

logger = get_logger()

# 連番はコンテナ単位で保持する
client_service = RegisterClientService(
    factory=ClientFactory(counter=SequenceCounter())
)
reservation_service = MakeReservationService(
    factory=ReservationFactory(counter=SequenceCounter())
)


@logger.inject_lambda_context
@event_parser(model=MakeReservationRequest)
def lambda_handler(event: MakeReservationRequest, context: LambdaContext) -> dict:
    """予約作成 Lambda ハンドラ"""
    logger.info("Received make reservation request")

    client_details: ClientDetails = {
        "name": event.client.name,
        "identity_number": event.client.identity_number,
        "phone": event.client.phone,
    }
    reservation_details: ReservationDetails = {
        "check_in": event.reservation.check_in_date,
        "check_out": event.reservation.check_out_date,
        "room_type": event.reservation.room_type,
        "extra_bed": event.reservation.extra_bed,
    }

    try:
        client = client_service.register(client_details)
        reservation = reservation_service.reserve(client, reservation_details)
    except DomainException as e:
        logger.warning("Reservation rejected", extra={"reason": str(e)})
        return to_error_response(e)

    return to_response(reservation)
