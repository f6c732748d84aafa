"""SMS transport adapters.

TwilioTransport talks to the real Twilio API; FakeSMSTransport records
messages in memory and is used in development and tests.
"""

from functools import partial


def default_transport_provider(account_sid: str, auth_token: str):
    """Return a provider creating a ``TwilioTransport`` for the given account.

    A new transport is created for every dispatch and never closed, so it
    runs without a pooled session.
    """
    from twilio_alerts.transport.twilio_adapter import TwilioTransport

    return partial(TwilioTransport, account_sid, auth_token, pool_connections=False)
