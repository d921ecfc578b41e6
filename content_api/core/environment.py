from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

from content_api.core.exceptions import ConfigError


@dataclass(frozen=True)
class ExecutionEnvironment:
    """
    Где выполняется код: серверный рендер или браузер.
    Задается хостингом один раз и дальше не меняется.
    """
    is_server: bool
    origin: str = "http://localhost:3000"

    @classmethod
    def from_settings(cls, settings: Any) -> "ExecutionEnvironment":
        return cls(is_server=settings.IS_SERVER, origin=settings.BROWSER_ORIGIN)

    @classmethod
    def server(cls) -> "ExecutionEnvironment":
        return cls(is_server=True)

    @classmethod
    def browser(cls, origin: str = "http://localhost:3000") -> "ExecutionEnvironment":
        return cls(is_server=False, origin=origin)


class EnvironmentResolver:
    """
    Выбирает base URL по контексту выполнения.
    Сервер не может достучаться до себя через публичный адрес, поэтому ходит в loopback.
    Браузер получает относительный /api/ и резолвит его от текущего origin.
    """

    def __init__(self, settings: Any, environment: ExecutionEnvironment):
        if not 0 < settings.PORT < 65536:
            raise ConfigError(f"Invalid PORT: {settings.PORT}")
        self.settings = settings
        self.environment = environment

    def is_server_execution(self) -> bool:
        return self.environment.is_server

    def resolve_base_url(self) -> str:
        if self.is_server_execution():
            return f"http://{self.settings.SERVER_HOST}:{self.settings.PORT}/api/"
        return self.settings.API_PREFIX

    def absolute_url(self, base_url: str, path: str) -> str:
        # Относительный base URL (браузер) достраиваем от origin
        root = urljoin(self.environment.origin, base_url)
        return urljoin(root, path.lstrip("/"))
