"""SMS transport port (abstract interface).

Defines the contract every SMS transport adapter must implement. This
enables swapping between FakeSMSTransport (dev/test) and TwilioTransport
(production) without changing the integration itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SMSResult:
    """Result of handing a single SMS over to the provider."""

    receiver: str
    message_id: str | None = None
    status: str | None = None


class SMSTransport(ABC):
    """Abstract SMS transport interface."""

    @abstractmethod
    async def send_sms(self, sender: str, receiver: str, message: str) -> SMSResult:
        """Send an SMS from ``sender`` to ``receiver``.

        Raises on failure; there is no failed ``SMSResult``.
        """
        ...
