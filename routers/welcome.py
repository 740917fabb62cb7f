import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Student Records API!"

router = APIRouter(tags=["welcome"])

@router.api_route(
    "/HttpWebApi",
    methods=["GET", "POST"],
    response_class=PlainTextResponse,
    summary="Liveness probe for the host",
)
def welcome():
    logger.info("Processed welcome request")
    return PlainTextResponse(WELCOME_MESSAGE)
