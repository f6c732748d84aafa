"""Twilio SMS transport adapter.

Uses the twilio SDK with its aiohttp-based ``AsyncTwilioHttpClient`` so
that many messages can be in flight at once from a single event loop.
"""

import structlog
from twilio.base.exceptions import TwilioException
from twilio.http.async_http_client import AsyncTwilioHttpClient
from twilio.rest import Client

from twilio_alerts.exceptions import SMSDeliveryError
from twilio_alerts.transport.port import SMSResult, SMSTransport

logger = structlog.get_logger(__name__)


class TwilioTransport(SMSTransport):
    """Production transport sending SMS through the Twilio Messages API.

    With ``pool_connections=True`` the transport keeps one aiohttp session
    open until ``aclose()``; without it every request opens and closes its
    own session, so the transport needs no cleanup.
    """

    def __init__(self, account_sid: str, auth_token: str, pool_connections: bool = True) -> None:
        self._http_client = AsyncTwilioHttpClient(pool_connections=pool_connections)
        self._client = Client(account_sid, auth_token, http_client=self._http_client)

    async def send_sms(self, sender: str, receiver: str, message: str) -> SMSResult:
        logger.debug("Sending Twilio SMS", receiver=receiver)
        try:
            resource = await self._client.messages.create_async(
                to=receiver,
                from_=sender,
                body=message,
            )
        except TwilioException as exc:
            logger.error("Twilio SMS sending failed", receiver=receiver, error=str(exc))
            raise SMSDeliveryError(
                f"Twilio rejected SMS send request: {exc}", receiver=receiver
            ) from exc

        return SMSResult(receiver=receiver, message_id=resource.sid, status=resource.status)

    async def aclose(self) -> None:
        """Close the underlying HTTP session."""
        await self._http_client.close()
