import os

import pytest

from scripts.invoke_local import load_handler

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
FUNCTIONS_DIR = os.path.join(PROJECT_ROOT, "src")


@pytest.fixture
def gamenight_handler():
    return load_handler("gamenight", FUNCTIONS_DIR)


@pytest.fixture
def hello_handler():
    return load_handler("hello", FUNCTIONS_DIR)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from a directory without a .env file and with no config vars set."""
    monkeypatch.chdir(tmp_path)
    for name in ("API_STAGE_NAME", "LOG_LEVEL"):
        # setenv first so values loaded from a .env file are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def load_function():
    """Load a handler after the test has set its environment."""
    return lambda function: load_handler(function, FUNCTIONS_DIR)
