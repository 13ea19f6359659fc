"""
tests.conftest

Shared fixtures: an in-process gateway wired to a stubbed evaluator.
"""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI

from tests.helpers import STUB_BACKEND_URL, StubEvaluator
from visa_gateway.api.app import create_app
from visa_gateway.api.deps import evaluator_client
from visa_gateway.evaluator_client import EvaluatorClient, create_http_client
from visa_gateway.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", backend_url=STUB_BACKEND_URL)


@pytest.fixture
def evaluator() -> StubEvaluator:
    return StubEvaluator()


@pytest.fixture
def app(settings: Settings, evaluator: StubEvaluator) -> FastAPI:
    app = create_app(settings=settings)
    stub_http = create_http_client(settings, transport=httpx.MockTransport(evaluator.handler))
    # Replaces the lifespan-managed client, so tests need not enter the lifespan.
    app.dependency_overrides[evaluator_client] = lambda: EvaluatorClient(http=stub_http)
    return app
