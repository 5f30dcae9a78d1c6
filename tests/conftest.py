"""Test configuration and fixtures."""

import logfire
import pytest

# Keep spans local: no console noise, nothing sent anywhere
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def alice() -> str:
    return "user-alice"


@pytest.fixture
def bob() -> str:
    return "user-bob"
