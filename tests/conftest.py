from __future__ import annotations

import logging
import os

os.environ.setdefault("APP_ENVIRONMENT", "testing")

import pytest
from fastapi.testclient import TestClient

from diagnostic.domain.dimensions import DIMENSION_NAMES
from diagnostic.domain.models import Question
from diagnostic.infrastructure.config import reset_settings
from diagnostic.web.main import create_application

SETTINGS_ENV_PREFIXES = ("APP_", "LOG_", "SCORING_", "SECURITY_")


@pytest.fixture(autouse=True)
def clean_settings():
    before = {k: v for k, v in os.environ.items() if k.startswith(SETTINGS_ENV_PREFIXES)}
    reset_settings()
    yield
    for key in [k for k in os.environ if k.startswith(SETTINGS_ENV_PREFIXES)]:
        if key not in before:
            del os.environ[key]
    os.environ.update(before)
    reset_settings()


@pytest.fixture
def questions() -> list[Question]:
    """Four items per dimension; the last item of each dimension is reverse scored."""
    items = []
    for order, name in enumerate(DIMENSION_NAMES, start=1):
        for n in range(1, 5):
            items.append(
                Question(
                    id=f"d{order}q{n}",
                    dimension=name,
                    dimension_order=order,
                    question_order=n,
                    question_text=f"Pergunta {n} de {name}",
                    reverse_scored=n == 4,
                )
            )
    return items


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_application())


@pytest.fixture
def diagnostic_logs(caplog):
    """caplog wired to the ``diagnostic`` logger, which does not propagate once configured."""
    logger = logging.getLogger("diagnostic")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="diagnostic")
    yield caplog
    logger.removeHandler(caplog.handler)
