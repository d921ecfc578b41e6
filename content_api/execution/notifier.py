import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

# errorToast(notification), notification = {message, details: {path, responseCode, message}}.
# Результат не ждем и не смотрим.
Notifier = Callable[[Dict[str, Any]], Any]


def log_notifier(notification: Dict[str, Any]) -> None:
    """Нотификатор по умолчанию, когда UI-тост не подключен."""
    details = notification["details"]
    logger.warning(f"⚠️ {notification['message']} path={details['path']} code={details['responseCode']}")
