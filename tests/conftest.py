"""
Test bootstrap:
- Make the tests directory importable so ``helpers`` resolves
- Provide a scripted transport and a client wired to it
"""
import sys
import pathlib
import pytest

TESTS_DIR = pathlib.Path(__file__).parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))


@pytest.fixture
def mock_transport():
    """Provide a transport that replays queued outcomes."""
    from helpers import MockTransport
    return MockTransport()


@pytest.fixture
def client(mock_transport):
    """Provide a client dispatching through the mock transport."""
    from stripe_client import ClientConfig, StripeClient
    return StripeClient(ClientConfig(api_key="sk_test_123"), transport=mock_transport)
