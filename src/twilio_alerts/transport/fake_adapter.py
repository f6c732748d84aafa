"""Fake SMS transport that records sent messages for testing.

Simulates the provider without any external calls. It can be configured
at runtime to fail, either for every receiver or only for a chosen few,
which makes partial fan-out failures reproducible.
"""

from uuid import uuid4

from twilio_alerts.exceptions import SMSDeliveryError
from twilio_alerts.transport.port import SMSResult, SMSTransport


class FakeSMSTransport(SMSTransport):
    """SMS transport that records messages in memory for test assertions."""

    def __init__(self) -> None:
        self.sent_messages: list[dict] = []
        self.should_succeed: bool = True
        self.failure_reason: str = "SMS delivery failed"
        self.failing_receivers: set[str] = set()

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "SMS delivery failed",
        failing_receivers: set[str] | None = None,
    ) -> None:
        """Configure the fake transport behavior for testing.

        With ``failing_receivers`` only those numbers fail, regardless of
        ``should_succeed``.
        """
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.failing_receivers = set(failing_receivers or ())

    def _fails_for(self, receiver: str) -> bool:
        if self.failing_receivers:
            return receiver in self.failing_receivers
        return not self.should_succeed

    async def send_sms(self, sender: str, receiver: str, message: str) -> SMSResult:
        if self._fails_for(receiver):
            raise SMSDeliveryError(f"{self.failure_reason}: {receiver}", receiver=receiver)

        message_id = f"SM{uuid4().hex}"
        self.sent_messages.append(
            {
                "message_id": message_id,
                "sender": sender,
                "receiver": receiver,
                "message": message,
            }
        )
        return SMSResult(receiver=receiver, message_id=message_id, status="queued")

    def reset(self) -> None:
        """Clear sent messages (useful between tests)."""
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "SMS delivery failed"
        self.failing_receivers = set()
