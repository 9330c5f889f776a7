"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration
- Shared fixtures across all tests
"""

import sys
from pathlib import Path

import logfire
import pytest


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    # Add project root to sys.path to ensure top-level packages are importable
    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "integration: marks tests that exercise the HTTP API through the app"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests; nothing leaves the machine
    logfire.configure(
        service_name="prompt_stumble_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )

    logfire.info(
        "Starting test suite",
        project_root=str(project_root),
    )


def pytest_sessionfinish(session, exitstatus):
    """Log test session completion with summary statistics."""
    logfire.info(
        "Test suite completed",
        exit_status=exitstatus,
        tests_collected=session.testscollected,
        tests_failed=session.testsfailed,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"SITE_BASE_URL": "https://example.com"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars


@pytest.fixture
def sample_prompt_data():
    """Valid payload for creating a prompt."""
    return {
        "title": "Interview Coach",
        "description": "Practice answers for a {role} interview with pointed feedback.",
        "content": "Act as a hiring manager for a {role} position at {company}. Ask me one question at a time.",
        "tags": ["Career", "Practice"],
        "category": "Career",
        "creator_name": "Priya Patel",
        "creator_initials": "PP",
        "compatible_models": ["GPT-4", "Claude 3"],
    }
