"""Twilio integration: sends SMS alerts to one or more receivers.

The integration resolves the message body and the receivers for every
call, then fans out one transport send per receiver and waits for all of
them. Nothing is retried: a failed send fails the whole call.
"""

import asyncio
from collections.abc import Callable

import structlog

from twilio_alerts.configuration import Builder, TwilioIntegrationConfiguration, is_blank
from twilio_alerts.exceptions import InvalidArgumentError, NullArgumentError
from twilio_alerts.transport.port import SMSResult

logger = structlog.get_logger(__name__)


def merge_receivers(default_receivers, custom_receivers) -> list[str]:
    """Union of default and custom receivers, defaults first.

    Duplicates across (and within) the two lists collapse to a single
    entry. With no default receivers the custom list is returned as given.
    """
    if not default_receivers:
        return list(custom_receivers)

    return list(dict.fromkeys([*default_receivers, *custom_receivers]))


class TwilioIntegration:
    """Integration with Twilio, the SMS service."""

    name = "Twilio"

    def __init__(self, configuration: TwilioIntegrationConfiguration):
        if configuration is None:
            raise NullArgumentError(
                "Twilio Integration configuration has not been provided.", "configuration"
            )

        self._configuration = configuration

    @property
    def configuration(self) -> TwilioIntegrationConfiguration:
        return self._configuration

    async def send_sms(self, message: str | None = None, *receivers: str) -> list[SMSResult]:
        """Send an SMS to every resolved receiver.

        Args:
            message: Body of the SMS. Overrides the default message when given.
            *receivers: Extra receiver numbers, merged with the default receivers.

        Returns:
            One ``SMSResult`` per receiver, in receiver order.

        Raises:
            InvalidArgumentError: no body or no receivers could be resolved.
            ExceptionGroup: two or more transport sends failed.
            Exception: the transport's own error when exactly one send failed.
        """
        body = self._configuration.default_message if is_blank(message) else message
        if is_blank(body):
            raise InvalidArgumentError("SMS body has not been defined.", "body")

        custom_receivers = [receiver for receiver in receivers or () if not is_blank(receiver)]
        sms_receivers = merge_receivers(self._configuration.default_receivers, custom_receivers)
        if not sms_receivers:
            raise InvalidArgumentError("SMS receiver(s) have not been defined.", "receivers")

        logger.debug("Dispatching SMS", integration=self.name, receivers=len(sms_receivers))

        transport = self._configuration.transport_provider()
        outcomes = await asyncio.gather(
            *(
                transport.send_sms(self._configuration.sender, receiver, body)
                for receiver in sms_receivers
            ),
            return_exceptions=True,
        )

        failures = []
        for receiver, outcome in zip(sms_receivers, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "SMS dispatch failed",
                    integration=self.name,
                    receiver=receiver,
                    error=str(outcome),
                )
                failures.append(outcome)

        if len(failures) == 1:
            raise failures[0]
        if failures:
            raise BaseExceptionGroup(
                f"SMS dispatch failed for {len(failures)} of {len(sms_receivers)} receivers",
                failures,
            )

        logger.info("SMS dispatched", integration=self.name, receivers=len(sms_receivers))
        return list(outcomes)

    @classmethod
    def create(cls, configuration: TwilioIntegrationConfiguration) -> "TwilioIntegration":
        """Factory method for creating a new instance of TwilioIntegration."""
        return cls(configuration)

    @classmethod
    def create_with_credentials(
        cls,
        account_sid: str,
        auth_token: str,
        sender: str,
        configurator: Callable[[Builder], object] | None = None,
    ) -> "TwilioIntegration":
        """Build the configuration in place and create the integration.

        ``configurator`` receives the configuration builder before it is built,
        e.g. ``lambda cfg: cfg.with_default_receivers("+1123456780")``.
        """
        builder = TwilioIntegrationConfiguration.create(account_sid, auth_token, sender)
        if configurator is not None:
            configurator(builder)

        return cls.create(builder.build())
