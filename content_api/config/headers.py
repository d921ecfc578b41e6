from typing import Any, Dict

# Базовые заголовки для JSON API.
# "Accept-Encoding" не указываем: httpx добавит его сам и распакует ответ.
BASE_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "X-Requested-With": "XMLHttpRequest",
}


def get_headers(settings: Any) -> Dict[str, str]:
    """Заголовки для всех запросов клиента."""
    headers = BASE_HEADERS.copy()
    headers["User-Agent"] = f"{settings.APP_NAME}/{settings.APP_VERSION}"
    return headers
