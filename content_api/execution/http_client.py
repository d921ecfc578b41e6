import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple

import httpx

from content_api.config.headers import get_headers
from content_api.core.environment import EnvironmentResolver, ExecutionEnvironment
from content_api.core.exceptions import RequestFailure, TransportFailure, http_error_for
from content_api.execution.classifier import build_notification, classify
from content_api.execution.context import RequestContext
from content_api.execution.notifier import Notifier, log_notifier

logger = logging.getLogger(__name__)

RequestStep = Callable[[RequestContext], RequestContext]
ResponseStep = Callable[[Any], Any]
ErrorStep = Callable[[RequestFailure, RequestContext], None]


def read_body(response: httpx.Response) -> Any:
    """JSON, если парсится. Иначе текст. Пустое тело -> None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def unwrap_payload(response: httpx.Response) -> Any:
    """Отдаем наружу только тело. Заголовки и статус остаются здесь."""
    return read_body(response)


def _to_failure(e: Exception, context: RequestContext) -> RequestFailure:
    """
    Перевод ошибок httpx в таксономию приложения.
    Делается один раз на границе транспорта, дальше ошибка летит без изменений.
    """
    # 1. Ответ получен, статус не 2xx
    if isinstance(e, httpx.HTTPStatusError):
        return http_error_for(
            e.response.status_code,
            context,
            url=str(e.request.url),
            body=read_body(e.response),
        )

    # 2. Ответа нет (ConnectError, Timeout, ProtocolError, InvalidURL...)
    return TransportFailure(context, e)


class ApiClient:
    """
    Единый HTTP-клиент для всех фасадов.
    Собирается явно один раз на процесс и передается по ссылке.
    Пайплайн задается при инициализации и больше не меняется:
    request_steps -> dispatch -> response_steps | error_steps.
    Состояния конкретного вызова на клиенте нет, всё живет в RequestContext.
    """

    def __init__(
        self,
        settings: Any,
        environment: Optional[ExecutionEnvironment] = None,
        notifier: Optional[Notifier] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.environment = environment or ExecutionEnvironment.from_settings(settings)
        self.resolver = EnvironmentResolver(settings, self.environment)
        self.notifier: Notifier = notifier or log_notifier

        self.request_steps: Tuple[RequestStep, ...] = (self.apply_base_url,)
        self.response_steps: Tuple[ResponseStep, ...] = (unwrap_payload,)
        self.error_steps: Tuple[ErrorStep, ...] = (self.notify_if_needed,)

        timeout = httpx.Timeout(
            connect=settings.HTTP_TIMEOUT_CONNECT,
            read=settings.HTTP_TIMEOUT_READ,
            write=settings.HTTP_TIMEOUT_WRITE,
            pool=settings.HTTP_TIMEOUT_POOL,
        )
        limits = httpx.Limits(
            max_keepalive_connections=settings.MAX_CONNECTIONS,
            max_connections=settings.MAX_CONNECTIONS,
        )
        self._client = httpx.AsyncClient(
            headers=get_headers(settings),
            timeout=timeout,
            limits=limits,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- pipeline steps ---
    def apply_base_url(self, context: RequestContext) -> RequestContext:
        return context.with_base_url(self.resolver.resolve_base_url())

    def notify_if_needed(self, error: RequestFailure, context: RequestContext) -> None:
        classification = classify(error, context, self.environment)
        classified = classification.error

        if not classification.notify:
            logger.info(
                f"Request failed, notification skipped: {context.method} {classified.request_path} "
                f"(code={classified.http_status}, skippable={classified.is_skippable}, "
                f"server={self.environment.is_server})"
            )
            return

        logger.warning(f"Request failed: {context.method} {classified.request_path} (code={classified.http_status})")
        notification = build_notification(classified, context)
        try:
            self.notifier(notification.to_payload())
        except Exception:
            # Тост - побочный эффект. Исходная ошибка все равно уйдет вызывающему.
            logger.exception("Error notifier failed")

    # --- dispatch ---
    async def request(self, context: RequestContext) -> Any:
        for step in self.request_steps:
            context = step(context)

        try:
            response = await self._dispatch(context)
        except RequestFailure as error:
            for error_step in self.error_steps:
                error_step(error, context)
            raise

        payload: Any = response
        for response_step in self.response_steps:
            payload = response_step(payload)
        return payload

    async def _dispatch(self, context: RequestContext) -> httpx.Response:
        try:
            url = self.resolver.absolute_url(context.base_url or "", context.path)
            logger.debug(f"{context.method} {url}")
            response = await self._client.request(
                context.method,
                url,
                params=context.params,
                json=context.json,
            )
            response.raise_for_status()
            return response
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _to_failure(e, context) from e

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        request_name: Optional[str] = None,
        skip_error_codes: Iterable[int] = (),
    ) -> Any:
        return await self.request(RequestContext.build(
            path, "GET", params=params, request_name=request_name, skip_error_codes=skip_error_codes
        ))

    async def post(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        request_name: Optional[str] = None,
        skip_error_codes: Iterable[int] = (),
    ) -> Any:
        return await self.request(RequestContext.build(
            path, "POST", params=params, json=json, request_name=request_name, skip_error_codes=skip_error_codes
        ))
