"""Outbound webhook delivery."""

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from prompthook.config import settings
from prompthook.logging_config import get_logger

logger = get_logger("delivery_service")


@dataclass
class DeliveryResult:
    status_code: Optional[int] = None
    body: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


def deliver_payload(url: str, payload: Any, timeout_seconds: Optional[float] = None) -> DeliveryResult:
    """POST ``payload`` as JSON to ``url`` once.

    Args:
        url: Destination webhook URL
        payload: JSON-serializable body
        timeout_seconds: Overrides ``settings.delivery_timeout_seconds``

    Returns:
        DeliveryResult with the raw status and body text, or with ``error``
        set when the request itself could not be completed.
    """
    timeout = timeout_seconds if timeout_seconds is not None else settings.delivery_timeout_seconds

    try:
        with httpx.Client(timeout=timeout) as client:
            response = client.post(
                url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.error(f"Webhook delivery to {url} failed: {e}")
        return DeliveryResult(error=str(e) or e.__class__.__name__)

    logger.debug(f"Webhook delivery status: {response.status_code}")
    return DeliveryResult(status_code=response.status_code, body=response.text)
