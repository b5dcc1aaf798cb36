"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

import expend.core.config as config_module
from expend.context.models import Context, UserContext
from expend.context.store import ContextStore
from expend.core.dates import FinancialDate

from tests.fixtures.payloads import REFERENCE_MONDAY, stored_context


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def user_context() -> UserContext:
    """A German, billable-travel user context."""
    return UserContext.from_dict(stored_context())


@pytest.fixture
def context(user_context) -> Context:
    """An invocation context anchored in the week of Monday 2018-09-24."""
    return Context(user=user_context, reference_date=FinancialDate.from_string(REFERENCE_MONDAY))


@pytest.fixture
def context_store(temp_dir, user_context) -> ContextStore:
    """A context store holding the 'default' context."""
    store = ContextStore(temp_dir / "contexts")
    store.save("default", user_context)
    return store


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and drop any cached configuration."""
    monkeypatch.setenv("EXPEND_ENV", "test")
    monkeypatch.setenv("EXPEND_CONTEXT_DIR", str(tmp_path / "contexts"))

    # Never pick up real credentials or rate overrides
    for name in ("EXPENSIFY_USER_ID", "EXPENSIFY_USER_SECRET", "EXPENSIFY_BASE_URL", "EXPEND_RATES_FILE"):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(config_module, "_config", None)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "perdiem: Tests for the per-diem engine")
    config.addinivalue_line("markers", "cli: Tests for the command-line interface")
