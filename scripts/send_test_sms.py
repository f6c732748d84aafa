"""Send a test SMS through the Twilio integration.

Useful for checking credentials and sender numbers before wiring the
integration into a watchdog.

Prerequisites:
    export TWILIO_ACCOUNT_SID=AC...
    export TWILIO_AUTH_TOKEN=...
    export TWILIO_SENDER=+1123456789

Usage:
    python scripts/send_test_sms.py --to +1123456780
    python scripts/send_test_sms.py --to +1123456780 --to +1123456781 --message "Ping"
"""

import argparse
import asyncio
import os
import sys

# Add src/ to path so we can import the package without installing it
sys.path.insert(0, "src")

REQUIRED_ENV = ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_SENDER")


async def run(account_sid, auth_token, sender, receivers, message):
    from twilio_alerts import TwilioIntegration
    from twilio_alerts.transport.twilio_adapter import TwilioTransport

    transport = TwilioTransport(account_sid, auth_token)
    integration = TwilioIntegration.create_with_credentials(
        account_sid,
        auth_token,
        sender,
        lambda cfg: cfg.with_default_message(message).with_transport_provider(lambda: transport),
    )
    try:
        return await integration.send_sms(None, *receivers)
    finally:
        await transport.aclose()


def main():
    parser = argparse.ArgumentParser(description="Send a test SMS through Twilio")
    parser.add_argument(
        "--to",
        action="append",
        required=True,
        help="Receiver phone number (repeat for several receivers)",
    )
    parser.add_argument(
        "--message",
        default="Test message from twilio-alerts",
        help="SMS body",
    )
    args = parser.parse_args()

    missing = [name for name in REQUIRED_ENV if not os.getenv(name)]
    if missing:
        parser.error(f"missing environment variable(s): {', '.join(missing)}")

    from twilio_alerts.utils.logging import configure_logging

    configure_logging()

    results = asyncio.run(
        run(
            os.environ["TWILIO_ACCOUNT_SID"],
            os.environ["TWILIO_AUTH_TOKEN"],
            os.environ["TWILIO_SENDER"],
            args.to,
            args.message,
        )
    )
    for result in results:
        print(f"{result.receiver}: {result.status} ({result.message_id})")


if __name__ == "__main__":
    main()
