import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union
from urllib.parse import quote

from content_api.execution.http_client import ApiClient
from content_api.models.category import CategoryFull, CategoryInfo, CategoryStatus
from content_api.services.base import ResourceService

logger = logging.getLogger(__name__)


def _quote_id(category_id: Any) -> str:
    # id - один сегмент пути: "/", "..", "?" и "#" не должны увести запрос на другой endpoint
    return quote(str(category_id), safe="")


class CategoryService(ResourceService):
    """
    CRUD по категориям гайда.
    Записи только для чтения: после изменения берем свежую с сервера или доверяем его id.
    """

    async def get_category_by_id(self, category_id: str, request_name: Optional[str] = "Load category") -> CategoryFull:
        data = await self._call(f"category/{_quote_id(category_id)}", request_name=request_name)
        return CategoryFull.model_validate(data)

    async def get_category_list(self, request_name: Optional[str] = "Load categories") -> List[CategoryInfo]:
        data = await self._call("categories", request_name=request_name)
        # null / пустое тело = нет категорий, это не ошибка
        if not data:
            return []
        return [CategoryInfo.model_validate(item) for item in data]

    async def create_category(
        self,
        title: str,
        group: str,
        request_name: Optional[str] = "Create category",
    ) -> str:
        data = await self._call(
            "category",
            "POST",
            params={"title": title, "group": group},
            request_name=request_name,
        )
        category_id = str(data)
        logger.info(f"Category created: {category_id} ('{title}', group '{group}')")
        return category_id

    async def update_category_info(
        self,
        category_id: str,
        title: str,
        group: str,
        status: Union[CategoryStatus, str],
        skip_error_codes: Iterable[int] = (),
        request_name: Optional[str] = "Update category info",
    ) -> Any:
        """
        Обновляет title/group/status.
        На 409 (категорию уже поменял кто-то другой) летит Conflict.
        Передайте skip_error_codes=(409,), чтобы вместо общего тоста показать диалог конфликта.
        """
        return await self._call(
            f"category/{_quote_id(category_id)}/info",
            "POST",
            params={"title": title, "group": group, "status": CategoryStatus(status).value},
            request_name=request_name,
            skip_error_codes=skip_error_codes,
        )


@dataclass(frozen=True)
class Services:
    category: CategoryService


def build_services(client: ApiClient) -> Services:
    return Services(category=CategoryService(client))
