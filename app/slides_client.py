# app/slides_client.py
"""
Client for the external slide-building webhook.
The webhook receives {title, subtitle?, templateId, slides} and answers with
{id, url} on success or {error} on failure. The shared secret travels as a
query parameter and is never logged.
"""
import logging
from typing import Any, Dict

import requests

from .config import WEBHOOK_TIMEOUT_S
from .schemas import SlidesPayload

logger = logging.getLogger(__name__)


class SlidesServiceError(RuntimeError):
    """The slide builder could not be reached or refused the deck."""


def build_slides(
    payload: SlidesPayload,
    webhook_url: str,
    secret: str,
    timeout: float = WEBHOOK_TIMEOUT_S,
) -> Dict[str, Any]:
    body = payload.model_dump(by_alias=True, exclude_none=True)
    logger.info(
        "Forwarding deck to slide builder: %d slides, template %s",
        len(body["slides"]),
        body["templateId"],
    )
    try:
        resp = requests.post(
            webhook_url,
            params={"secret": secret},
            json=body,
            timeout=timeout,
        )
    except requests.RequestException as e:
        # request errors can echo the URL, secret included
        logger.warning("Slide builder unreachable: %s", type(e).__name__)
        raise SlidesServiceError(f"Slide builder unreachable: {type(e).__name__}") from e

    try:
        data = resp.json()
    except ValueError as e:
        raise SlidesServiceError(f"Slide builder returned invalid JSON ({resp.status_code})") from e

    if resp.status_code >= 400:
        message = data.get("error") if isinstance(data, dict) else None
        logger.warning("Slide builder failed with status %s", resp.status_code)
        raise SlidesServiceError(message or "Slides build failed")

    return data
