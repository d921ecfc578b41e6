from typing import TYPE_CHECKING, Any, Dict, Optional, Type

if TYPE_CHECKING:
    from content_api.execution.context import RequestContext


class AppBaseError(Exception):
    """Базовый класс ошибок."""
    pass


class ConfigError(AppBaseError):
    """Невалидная конфигурация (порт, origin и т.п.)."""
    pass


class RequestFailure(AppBaseError):
    """
    Любой неуспешный вызов API.
    Хранит RequestContext, чтобы классификатор видел skip_error_codes и request_name.
    """
    status_code: Optional[int] = None

    def __init__(self, message: str, context: "RequestContext"):
        self.context = context
        super().__init__(message)


class TransportFailure(RequestFailure):
    """
    Ответа нет вообще (ConnectError, Timeout и т.д.).
    Вызывающий код обязан обработать это сам: тост не показывается.
    """

    def __init__(self, context: "RequestContext", cause: Exception):
        self.cause = cause
        super().__init__(f"Transport failure for {context.url}: {cause.__class__.__name__}: {cause}", context)


class HttpError(RequestFailure):
    """Получен ответ с не-2xx статусом."""

    def __init__(self, status_code: int, context: "RequestContext", url: str, body: Any = None):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"HTTP Error {status_code}: {url}", context)


class ValidationError(HttpError):
    """400 Bad Request. Сервер отверг поля запроса."""
    pass


class NotFound(HttpError):
    """404. Ресурса с таким id нет."""
    pass


class Conflict(HttpError):
    """409. Ресурс изменен параллельно, представление вызывающего устарело."""
    pass


_STATUS_ERRORS: Dict[int, Type[HttpError]] = {
    400: ValidationError,
    404: NotFound,
    409: Conflict,
}


def http_error_for(status_code: int, context: "RequestContext", url: str, body: Any = None) -> HttpError:
    error_cls = _STATUS_ERRORS.get(status_code, HttpError)
    return error_cls(status_code, context, url, body)
