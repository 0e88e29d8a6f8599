import logging

import requests

from chelto.core import config

logger = logging.getLogger(__name__)


def notify_monitor(message: str) -> bool:
    """Send an HTML message to the monitor chat. Returns False when skipped or failed."""
    if not config.MONITOR_BOT_TOKEN or not config.MONITOR_CHAT_ID:
        return False

    payload = {
        "chat_id": config.MONITOR_CHAT_ID,
        "text": message,
        "parse_mode": "HTML",
    }

    try:
        resp = requests.post(
            f"https://api.telegram.org/bot{config.MONITOR_BOT_TOKEN}/sendMessage",
            json=payload,
            timeout=5,
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Telegram notify failed: %s", e)
        return False
    return True
