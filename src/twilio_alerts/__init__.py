"""SMS alerts for watchdog checks, sent through Twilio."""

from twilio_alerts.configuration import Builder, TwilioIntegrationConfiguration
from twilio_alerts.exceptions import (
    IntegrationNotFoundError,
    InvalidArgumentError,
    NullArgumentError,
    SMSDeliveryError,
    TwilioIntegrationError,
)
from twilio_alerts.integration import TwilioIntegration
from twilio_alerts.registry import (
    IntegrationRegistry,
    integrate_with_twilio,
    integrate_with_twilio_configuration,
    twilio,
)
from twilio_alerts.transport.port import SMSResult, SMSTransport

__all__ = [
    "Builder",
    "IntegrationNotFoundError",
    "IntegrationRegistry",
    "InvalidArgumentError",
    "NullArgumentError",
    "SMSDeliveryError",
    "SMSResult",
    "SMSTransport",
    "TwilioIntegration",
    "TwilioIntegrationConfiguration",
    "TwilioIntegrationError",
    "integrate_with_twilio",
    "integrate_with_twilio_configuration",
    "twilio",
]
