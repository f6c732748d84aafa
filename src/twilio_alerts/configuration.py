"""Configuration of the Twilio integration.

The configuration is an immutable value object. It is assembled through
``Builder``, which validates every field as it is set, so a built
configuration is always usable:

    configuration = (
        TwilioIntegrationConfiguration.create(account_sid, auth_token, "+1123456789")
        .with_default_message("Website is down!")
        .with_default_receivers("+1123456780", "+1123456781")
        .build()
    )
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from twilio_alerts.exceptions import InvalidArgumentError, NullArgumentError
from twilio_alerts.transport import default_transport_provider
from twilio_alerts.transport.port import SMSTransport

TransportProvider = Callable[[], SMSTransport]


def is_blank(value: str | None) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


@dataclass(frozen=True)
class TwilioIntegrationConfiguration:
    """Credentials, sender identity and defaults used by ``TwilioIntegration``."""

    account_sid: str
    auth_token: str = field(repr=False)
    sender: str
    default_receivers: tuple[str, ...] = ()
    default_message: str | None = None
    transport_provider: TransportProvider | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if is_blank(self.account_sid):
            raise InvalidArgumentError("Account SID can not be empty.", "account_sid")
        if is_blank(self.auth_token):
            raise InvalidArgumentError("Authentication token can not be empty.", "auth_token")
        if is_blank(self.sender):
            raise InvalidArgumentError("SMS sender can not be empty.", "sender")
        if self.default_message is not None and is_blank(self.default_message):
            raise InvalidArgumentError("Default message can not be empty.", "default_message")
        if isinstance(self.default_receivers, str):
            raise InvalidArgumentError(
                "Default receivers must be a sequence of numbers, not a string.",
                "default_receivers",
            )
        # Frozen dataclass: normalised values have to bypass __setattr__
        object.__setattr__(self, "default_receivers", tuple(self.default_receivers))
        if any(is_blank(receiver) for receiver in self.default_receivers):
            raise InvalidArgumentError(
                "Receiver(s) can not have empty number(s).", "default_receivers"
            )

        if self.transport_provider is None:
            object.__setattr__(
                self,
                "transport_provider",
                default_transport_provider(self.account_sid, self.auth_token),
            )

    @classmethod
    def create(cls, account_sid: str, auth_token: str, sender: str) -> "Builder":
        """Return a new builder for the given credentials and sender."""
        return Builder(account_sid, auth_token, sender)


class Builder:
    """Fluent builder for ``TwilioIntegrationConfiguration``.

    Every setter validates its input and raises ``InvalidArgumentError``
    (or ``NullArgumentError``) immediately.
    """

    def __init__(self, account_sid: str, auth_token: str, sender: str):
        self._configuration = TwilioIntegrationConfiguration(
            account_sid=account_sid,
            auth_token=auth_token,
            sender=sender,
        )

    def with_default_message(self, message: str) -> "Builder":
        """Set the body used when ``send_sms`` is called without a message."""
        if message is None:
            raise InvalidArgumentError("Default message can not be empty.", "default_message")

        self._configuration = replace(self._configuration, default_message=message)
        return self

    def with_default_receivers(self, *receivers: str) -> "Builder":
        """Set the phone numbers that receive every SMS."""
        if not receivers:
            raise InvalidArgumentError("Default receivers can not be empty.", "default_receivers")

        self._configuration = replace(self._configuration, default_receivers=receivers)
        return self

    def with_transport_provider(self, transport_provider: TransportProvider) -> "Builder":
        """Set a custom factory for the SMS transport (e.g. a fake in tests)."""
        if transport_provider is None:
            raise NullArgumentError("SMS transport provider can not be None.", "transport_provider")

        self._configuration = replace(self._configuration, transport_provider=transport_provider)
        return self

    def build(self) -> TwilioIntegrationConfiguration:
        return self._configuration
