from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Iterable, Mapping, Optional
from urllib.parse import urljoin


@dataclass(frozen=True)
class RequestContext:
    """
    Конфигурация одного исходящего запроса.
    Создается фасадом на каждый вызов, после отправки не меняется.
    """
    path: str
    method: str = "GET"
    params: Optional[Mapping[str, Any]] = None
    json: Any = None
    request_name: Optional[str] = None
    # Статусы, которые вызывающий обрабатывает сам (например 409 -> диалог конфликта)
    skip_error_codes: FrozenSet[int] = field(default_factory=frozenset)
    base_url: Optional[str] = None

    @classmethod
    def build(
        cls,
        path: str,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        request_name: Optional[str] = None,
        skip_error_codes: Iterable[int] = (),
    ) -> "RequestContext":
        return cls(
            path=path,
            method=method.upper(),
            params=params,
            json=json,
            request_name=request_name,
            skip_error_codes=frozenset(skip_error_codes),
        )

    def with_base_url(self, base_url: str) -> "RequestContext":
        return replace(self, base_url=base_url)

    @property
    def url(self) -> str:
        return urljoin(self.base_url or "", self.path.lstrip("/"))
