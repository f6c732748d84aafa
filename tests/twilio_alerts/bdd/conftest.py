"""Shared BDD fixtures and step definitions for SMS dispatch."""

import asyncio

import pytest
from pytest_bdd import given, parsers, then, when
from twilio_alerts import TwilioIntegration


@pytest.fixture()
def error():
    """Container for the exception raised by the dispatch, if any."""
    return {"exc": None}


def _split(numbers: str) -> list[str]:
    return [n.strip() for n in numbers.split(",") if n.strip()]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse(
        'a Twilio integration with default message "{message}" and default receivers "{receivers}"'
    ),
    target_fixture="integration",
)
def integration_with_defaults(builder, message, receivers):
    return TwilioIntegration.create(
        builder.with_default_message(message).with_default_receivers(*_split(receivers)).build()
    )


@given(
    parsers.cfparse('a Twilio integration with only default message "{message}"'),
    target_fixture="integration",
)
def integration_with_default_message(builder, message):
    return TwilioIntegration.create(builder.with_default_message(message).build())


@given(
    parsers.cfparse('a Twilio integration with only default receivers "{receivers}"'),
    target_fixture="integration",
)
def integration_with_default_receivers(builder, receivers):
    return TwilioIntegration.create(builder.with_default_receivers(*_split(receivers)).build())


@given(parsers.cfparse('the transport fails for "{receiver}"'))
def transport_fails_for(fake_transport, receiver):
    fake_transport.configure(failing_receivers={receiver})


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
def _dispatch(integration, error, *args):
    try:
        asyncio.run(integration.send_sms(*args))
    except Exception as exc:
        error["exc"] = exc


@when("SMS is sent")
def sms_is_sent(integration, error):
    _dispatch(integration, error)


@when(parsers.cfparse('SMS "{message}" is sent to "{receivers}"'))
def sms_is_sent_to(integration, error, message, receivers):
    _dispatch(integration, error, message, *_split(receivers))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the dispatch succeeds")
def dispatch_succeeds(error):
    assert error["exc"] is None


@then(parsers.cfparse('the dispatch fails with "{message}"'))
def dispatch_fails_with(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])


@then(parsers.cfparse("exactly {count:d} SMS were sent"))
def exactly_n_sent(fake_transport, count):
    assert len(fake_transport.sent_messages) == count


@then(parsers.cfparse('SMS were sent to "{receivers}"'))
def sent_to(fake_transport, receivers):
    assert sorted(m["receiver"] for m in fake_transport.sent_messages) == sorted(_split(receivers))


@then(parsers.cfparse('every SMS was sent from "{sender}" with body "{body}"'))
def every_sms_from_with_body(fake_transport, sender, body):
    assert fake_transport.sent_messages
    for message in fake_transport.sent_messages:
        assert message["sender"] == sender
        assert message["message"] == body
