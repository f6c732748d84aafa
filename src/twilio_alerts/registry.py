"""Integration registry: the host framework's extension point.

Integrations are registered once, while the watchdog is configured, and
resolved later by type from inside check hooks:

    registry = IntegrationRegistry()
    integrate_with_twilio(registry, account_sid, auth_token, "+1123456789",
                          lambda cfg: cfg.with_default_receivers("+1123456780"))
    ...
    await twilio(registry).send_sms("Website is down!")
"""

from collections.abc import Callable

import structlog

from twilio_alerts.configuration import Builder, TwilioIntegrationConfiguration
from twilio_alerts.exceptions import IntegrationNotFoundError, NullArgumentError
from twilio_alerts.integration import TwilioIntegration

logger = structlog.get_logger(__name__)


class IntegrationRegistry:
    """Holds one integration instance per integration type."""

    def __init__(self) -> None:
        self._integrations: dict[type, object] = {}

    def add_integration(self, integration) -> "IntegrationRegistry":
        """Register ``integration`` under its type, replacing any previous one."""
        if integration is None:
            raise NullArgumentError("Integration can not be None.", "integration")

        integration_type = type(integration)
        if integration_type in self._integrations:
            logger.info(
                "Replacing registered integration",
                integration=getattr(integration, "name", integration_type.__name__),
            )
        self._integrations[integration_type] = integration
        return self

    def resolve(self, integration_type: type):
        """Return the registered integration of the given type."""
        try:
            return self._integrations[integration_type]
        except KeyError:
            raise IntegrationNotFoundError(
                f"Integration {integration_type.__name__} has not been registered."
            ) from None

    def reset(self) -> None:
        """Remove all registered integrations (useful for testing)."""
        self._integrations.clear()

    def __contains__(self, integration_type: type) -> bool:
        return integration_type in self._integrations

    def __len__(self) -> int:
        return len(self._integrations)


def integrate_with_twilio(
    registry: IntegrationRegistry,
    account_sid: str,
    auth_token: str,
    sender: str,
    configurator: Callable[[Builder], object] | None = None,
) -> IntegrationRegistry:
    """Add the Twilio integration built from credentials and an optional configurator."""
    registry.add_integration(
        TwilioIntegration.create_with_credentials(account_sid, auth_token, sender, configurator)
    )
    return registry


def integrate_with_twilio_configuration(
    registry: IntegrationRegistry,
    configuration: TwilioIntegrationConfiguration,
) -> IntegrationRegistry:
    """Add the Twilio integration using a ready-made configuration."""
    registry.add_integration(TwilioIntegration.create(configuration))
    return registry


def twilio(registry: IntegrationRegistry) -> TwilioIntegration:
    """Resolve the Twilio integration from the registry."""
    return registry.resolve(TwilioIntegration)
