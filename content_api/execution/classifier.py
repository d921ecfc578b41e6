from dataclasses import dataclass
from typing import Any, Optional

from content_api.core.environment import ExecutionEnvironment
from content_api.core.exceptions import HttpError, RequestFailure
from content_api.execution.context import RequestContext
from content_api.models.notification import ErrorNotification, NotificationDetails


@dataclass(frozen=True)
class ClassifiedError:
    """Снимок упавшего запроса. Живет только внутри обработки ошибки."""
    http_status: Optional[int]
    is_skippable: bool
    response_body: Any
    request_path: str


@dataclass(frozen=True)
class Classification:
    notify: bool
    error: ClassifiedError


def classify(error: RequestFailure, context: RequestContext, environment: ExecutionEnvironment) -> Classification:
    """
    Решает, показывать ли глобальный тост.
    Тоста нет, если:
    - рендер на сервере (UI нет, ошибку обработает серверная error page);
    - ответа нет вообще (сеть/таймаут, вызывающий разбирается сам);
    - статус явно исключен вызывающим через skip_error_codes.
    """
    # 1. Сначала статус (None, если ответа не было)
    response_code = error.status_code if isinstance(error, HttpError) else None

    # 2. Потом проверка вхождения
    skip_error_codes = context.skip_error_codes
    is_skippable = bool(skip_error_codes) and response_code in skip_error_codes

    notify = not (environment.is_server or response_code is None or is_skippable)

    return Classification(
        notify=notify,
        error=ClassifiedError(
            http_status=response_code,
            is_skippable=is_skippable,
            response_body=getattr(error, "body", None),
            request_path=getattr(error, "url", None) or context.url,
        ),
    )


def build_notification(classified: ClassifiedError, context: RequestContext) -> ErrorNotification:
    request_name = f' "{context.request_name}"' if context.request_name else ""
    return ErrorNotification(
        message=f"Something went wrong, could not process{request_name} request.",
        details=NotificationDetails(
            path=classified.request_path,
            response_code=classified.http_status,
            message=classified.response_body,
        ),
    )
