"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_CHIMPKIT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CHIMPKIT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_CHIMPKIT_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def api_key():
    """API key of the account under test, from MAILCHIMP_API_KEY."""
    key = os.environ.get("MAILCHIMP_API_KEY")
    if not key:
        pytest.skip("MAILCHIMP_API_KEY is not set")
    return key
