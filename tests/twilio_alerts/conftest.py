import pytest
from twilio_alerts import TwilioIntegrationConfiguration
from twilio_alerts.transport.fake_adapter import FakeSMSTransport


@pytest.fixture()
def fake_transport():
    transport = FakeSMSTransport()
    yield transport
    transport.reset()


@pytest.fixture()
def builder(fake_transport):
    """Configuration builder wired to the in-memory transport."""
    return TwilioIntegrationConfiguration.create(
        "sid", "token", "+1123456789"
    ).with_transport_provider(lambda: fake_transport)
