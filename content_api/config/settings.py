from functools import lru_cache
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Settings(BaseSettings):
    # --- Basic Info ---
    APP_NAME: str = "content-api"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    # --- API Location ---
    # Порт сервиса. Нужен только для server-side base URL:
    # серверный процесс ходит сам к себе через loopback.
    PORT: int = 3000
    SERVER_HOST: str = "localhost"
    API_PREFIX: str = "/api/"

    # --- Execution Context ---
    # Значение по умолчанию для процесса. Хостинг-фреймворк может передать
    # свой ExecutionEnvironment при сборке клиента.
    IS_SERVER: bool = False
    # Аналог window.location.origin: относительный /api/ резолвится от него.
    BROWSER_ORIGIN: str = "http://localhost:3000"

    # --- HTTP Client Configuration ---
    # Только таймауты. Ретраев в этом слое нет.
    HTTP_TIMEOUT_CONNECT: float = 5.0
    HTTP_TIMEOUT_READ: float = 30.0
    HTTP_TIMEOUT_WRITE: float = 10.0
    HTTP_TIMEOUT_POOL: float = 5.0
    MAX_CONNECTIONS: int = 20

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="config/app.yaml",
        extra="ignore"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # init > env > .env > config/app.yaml > defaults
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
