"""HTTP client for the evaluation service log endpoint.

Each call validates the event, then makes a single POST. Nothing here
raises: rejected events, a missing token, error responses and network
failures all end in a diagnostic so logging never breaks the caller.
"""

import os
from datetime import datetime, timezone

import httpx
from dotenv import load_dotenv
from loguru import logger

from logging_middleware.logging.validation import validate

load_dotenv()

EVALUATION_SERVICE_URL = os.environ.get(
    "EVALUATION_SERVICE_URL", "http://20.244.56.144/evaluation-service/logs"
)
ACCESS_TOKEN = os.environ.get("ACCESS_TOKEN", "")


def _timestamp() -> str:
    # Millisecond precision with a Z suffix, e.g. 2025-01-01T12:00:00.000Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def log_event(stack: str, level: str, package_name: str, message: str) -> None:
    """Send one log event to the evaluation service. Fire-and-forget."""
    if not validate(stack, level, package_name):
        return

    if not ACCESS_TOKEN:
        logger.error("ACCESS_TOKEN not found in environment variables")
        return

    payload = {
        "stack": stack,
        "level": level,
        "package": package_name,
        "message": message,
        "timestamp": _timestamp(),
    }

    # A client per call keeps each send on the caller's event loop
    try:
        async with httpx.AsyncClient(timeout=5.0) as http:
            response = await http.post(
                EVALUATION_SERVICE_URL,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {ACCESS_TOKEN}",
                },
            )
    except httpx.HTTPError as exc:
        logger.error(f"Error sending log to evaluation service: {exc}")
        return
    except Exception as exc:
        # Last-resort catch so a client bug never reaches the caller
        logger.error(f"Error sending log to evaluation service: "
                     f"{type(exc).__name__}: {exc}")
        return

    if not response.is_success:
        logger.error(f"Logging failed: {response.status_code} {response.reason_phrase}")
        logger.error(f"Response: {response.text}")
        return

    logger.debug(f"[LOG SENT] {stack}:{level}:{package_name} - {message}")
