import logging
from typing import Optional

import httpx

from canchas_api import config

logger = logging.getLogger(__name__)


def notify_reserva(
    payload: dict,
    url: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> bool:
    """
    Envía la reserva recién creada al webhook configurado.

    Un solo intento, sin reintentos. Los errores se registran y no se
    propagan: la reserva ya está guardada cuando se llama.

    Returns:
        True si el webhook respondió 2xx
    """
    url = url or config.WEBHOOK_URL
    if not url:
        return False

    try:
        with httpx.Client(timeout=config.WEBHOOK_TIMEOUT, transport=transport) as client:
            r = client.post(url, json=payload)
            r.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("Webhook error for reserva %s: %s", payload.get("id"), e)
        return False

    logger.info("Webhook notified for reserva %s", payload.get("id"))
    return True
