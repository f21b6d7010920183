import logging

import pytest

from api.connectors.whatsapp.meta_errors import WhatsAppApiError
from api.connectors.whatsapp.meta_logging import log_meta_error, redact_endpoint


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        (
            "https://graph.facebook.com/v21.0/1234567890/messages",
            "https://graph.facebook.com/v21.0/{id}/messages",
        ),
        ("https://graph.facebook.com/v21.0/1234567890", "https://graph.facebook.com/v21.0/{id}"),
        (
            "https://graph.facebook.com/v21.0/abc/messages",
            "https://graph.facebook.com/v21.0/abc/messages",
        ),
    ],
)
def test_redact_endpoint(endpoint: str, expected: str) -> None:
    assert redact_endpoint(endpoint) == expected


def test_log_meta_error_redacts_phone_number_id(caplog: pytest.LogCaptureFixture) -> None:
    error = WhatsAppApiError(
        error_type="OAuthException", error_code=190, error_message="expired", is_permanent=True
    )

    with caplog.at_level(logging.WARNING, logger="api.connectors.whatsapp.meta_logging"):
        log_meta_error(error, "POST", "https://graph.facebook.com/v21.0/999/messages")

    record = caplog.records[-1]
    assert record.getMessage() == "whatsapp_api_error"
    assert record.endpoint == "https://graph.facebook.com/v21.0/{id}/messages"
    assert record.error_code == 190
