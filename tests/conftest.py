"""Shared pytest fixtures for resultkit tests."""

import logging

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resultkit.core import PagedInfo, ResultKitConfig
from resultkit.api import setup_result_handling


@pytest.fixture
def page_info() -> PagedInfo:
    """Second page of 25 items, 10 per page."""
    return PagedInfo.from_counts(page_number=2, page_size=10, total_count=25)


@pytest.fixture
def make_client():
    """Build a TestClient for an app wired with result handling.

    Usage: make_client(register_routes, environment="development")
    """

    def _make(register, **config_values) -> TestClient:
        app = FastAPI()
        setup_result_handling(app, ResultKitConfig(**config_values))
        register(app)
        return TestClient(app)

    return _make


@pytest.fixture
def reset_logging():
    """Restore structlog and the package logger after a test configures them."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("resultkit")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
