from __future__ import annotations

import os
import random
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Keep a developer's local .env out of test runs.
    os.environ["ENVIRONMENT"] = "test"
    os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture()
def store() -> Any:
    from job_portal.services.record_store import PortalStore

    return PortalStore()


@pytest.fixture()
def registry(store) -> Any:
    from job_portal.config import Settings
    from job_portal.registry import build_portal_registry

    return build_portal_registry(store, Settings(), rng=random.Random(7))


@pytest.fixture()
def client() -> Any:
    from job_portal.main import create_app

    app = create_app(rng=random.Random(7))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def profile_payload() -> dict[str, Any]:
    return {
        "name": "Shrey Singhal",
        "email": "shrey@example.com",
        "phone": "8057260114",
        "skills": ["JavaScript", "React"],
        "experience": [
            {"company": "AppSquadz", "role": "Software Developer", "duration": "1 year"},
        ],
    }


@pytest.fixture
def job_payload() -> dict[str, Any]:
    return {
        "title": "Software Backend Developer",
        "company": "AppSquadz",
        "location": "Remote Bangalore",
        "experience": "3+ years",
        "salary": 100000,
        "description": "Responsible for developing backend services",
        "skillsRequired": ["Node.js", "Express"],
    }
