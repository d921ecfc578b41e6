from typing import Any, Iterable, Mapping, Optional

from content_api.execution.context import RequestContext
from content_api.execution.http_client import ApiClient


class ResourceService:
    """Фасад над ApiClient: один метод = один round trip, без ретраев и кэша."""

    def __init__(self, client: ApiClient):
        self.client = client

    async def _call(
        self,
        path: str,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        request_name: Optional[str] = None,
        skip_error_codes: Iterable[int] = (),
    ) -> Any:
        context = RequestContext.build(
            path,
            method,
            params=params,
            json=json,
            request_name=request_name,
            skip_error_codes=skip_error_codes,
        )
        return await self.client.request(context)
