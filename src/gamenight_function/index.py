import json
import logging
import os

logger = logging.getLogger(__name__)
logger.setLevel((os.environ.get("LOG_LEVEL") or "INFO").upper())


def lambda_handler(event, context):
    logger.debug("Received event: %s", event)
    return {
        "statusCode": 200,
        "headers": {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "*",
        },
        "body": json.dumps({"message": "hello"}),
    }
