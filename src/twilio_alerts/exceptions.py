"""Exceptions raised by the Twilio integration."""


class TwilioIntegrationError(Exception):
    """Base exception for integration errors."""


class InvalidArgumentError(TwilioIntegrationError, ValueError):
    """An argument failed validation (blank credentials, receivers, body)."""

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class NullArgumentError(InvalidArgumentError):
    """A required argument was None."""


class IntegrationNotFoundError(TwilioIntegrationError, LookupError):
    pass


class SMSDeliveryError(TwilioIntegrationError):
    """The SMS transport failed to hand a message over to the provider."""

    def __init__(self, message: str, receiver: str | None = None):
        super().__init__(message)
        self.receiver = receiver
