import logging
import os
from dotenv import load_dotenv


class Config:
    """Config class. Load env vars."""

    def __init__(self) -> None:
        """Initialize config class."""
        self._parse_environment_files()

        self._api_stage_name = os.getenv("API_STAGE_NAME", "prod")
        self._log_level = os.getenv("LOG_LEVEL", "INFO")

    @property
    def api_stage_name(self) -> str:
        """Get the REST API deployment stage name."""
        if not self._api_stage_name:
            raise ValueError("API_STAGE_NAME must not be empty.")

        return self._api_stage_name

    @property
    def log_level(self) -> str:
        """Get the log level passed to the Lambda functions."""
        level = self._log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL '{self._log_level}' is not a valid level.")

        return level

    @staticmethod
    def _parse_environment_files() -> None:
        """Load the .env file."""

        load_dotenv(".env", verbose=True)
