import json
import logging
import os
from datetime import datetime, timezone

logger = logging.getLogger(__name__)
logger.setLevel((os.environ.get("LOG_LEVEL") or "INFO").upper())


def _iso_timestamp():
    # Millisecond precision with a Z suffix, e.g. 2026-10-19T15:27:03.512Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def lambda_handler(event, context):
    logger.debug("Received event: %s", event)
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "application/json",
        },
        "body": json.dumps(
            {"message": "Hello from GameNight!", "timestamp": _iso_timestamp()}
        ),
    }
