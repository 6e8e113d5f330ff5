import argparse
import importlib.util
import json
import logging
import os
import sys

logger = logging.getLogger("invoke_local")

EXPECTED_MESSAGES = {
    "gamenight": "hello",
    "hello": "Hello from GameNight!",
}


def load_handler(function: str, functions_dir: str):
    path = os.path.join(functions_dir, f"{function}_function", "index.py")
    spec = importlib.util.spec_from_file_location(f"{function}_function_index", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.lambda_handler


def invoke(handler, event, expected_message: str) -> int:
    try:
        response = handler(event, None)
        logger.info("[DEBUG_LOG] Response: %s", response)

        if response["statusCode"] != 200:
            logger.error(
                "[DEBUG_LOG] Error: Expected status code 200 but got %s",
                response["statusCode"],
            )
            return 1

        body = json.loads(response["body"])
        if body.get("message") != expected_message:
            logger.error(
                '[DEBUG_LOG] Error: Expected message "%s" but got %s',
                expected_message,
                body.get("message"),
            )
            return 1

        logger.info("[DEBUG_LOG] Test passed successfully!")
        return 0
    except Exception as exc:
        logger.error("[DEBUG_LOG] Test failed with error: %s", exc)
        return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Invoke a GameNight Lambda handler locally")
    parser.add_argument("--function", choices=sorted(EXPECTED_MESSAGES), default="gamenight")
    parser.add_argument("--event", default="{}", help="JSON event payload")
    parser.add_argument("--functions-dir", default=os.path.join(os.path.dirname(__file__), "..", "src"))
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        event = json.loads(args.event)
    except json.JSONDecodeError as exc:
        logger.error("[DEBUG_LOG] Error: Invalid event JSON: %s", exc)
        return 1

    handler = load_handler(args.function, os.path.abspath(args.functions_dir))
    return invoke(handler, event, EXPECTED_MESSAGES[args.function])


if __name__ == "__main__":
    sys.exit(main())
