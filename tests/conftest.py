"""Pytest fixtures: in-memory category API served through httpx.MockTransport."""

import re
from typing import Any, Dict, List, Optional, Set

import httpx
import pytest
import pytest_asyncio

from content_api.config.settings import Settings
from content_api.core.environment import ExecutionEnvironment
from content_api.execution.http_client import ApiClient

ORIGIN = "http://testserver"
CREATED = "2026-10-19T10:00:00Z"

_CATEGORY_RE = re.compile(r"^/api/category/([^/]+)$")
_CATEGORY_INFO_RE = re.compile(r"^/api/category/([^/]+)/info$")


class FakeCategoryApi:
    """Minimal stand-in for the category endpoints of the back end."""

    def __init__(self) -> None:
        self.categories: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.conflicting_ids: Set[str] = set()
        self.transport_error: Optional[Exception] = None
        self._next_id = 1

    def add(self, title: str, group: str, status: str = "CategoryStub", **extra: Any) -> str:
        category_id = f"cat-{self._next_id}"
        self._next_id += 1
        self.categories[category_id] = {
            "id": category_id,
            "title": title,
            "created": CREATED,
            "group": group,
            "status": status,
            "description": {},
            "items": [],
            **extra,
        }
        return category_id

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.transport_error is not None:
            raise self.transport_error

        path = request.url.path
        params = request.url.params

        if request.method == "GET" and path == "/api/categories":
            infos = [
                {k: c[k] for k in ("id", "title", "created", "group", "status")}
                for c in self.categories.values()
            ]
            return httpx.Response(200, json=infos)

        match = _CATEGORY_RE.match(path)
        if request.method == "GET" and match:
            category = self.categories.get(match.group(1))
            if category is None:
                return httpx.Response(404, json={"error": "Category not found"})
            return httpx.Response(200, json=category)

        if request.method == "POST" and path == "/api/category":
            title, group = params.get("title"), params.get("group")
            if not title or not group:
                return httpx.Response(400, json={"error": "title and group are required"})
            return httpx.Response(200, json=self.add(title, group))

        match = _CATEGORY_INFO_RE.match(path)
        if request.method == "POST" and match:
            category_id = match.group(1)
            if category_id not in self.categories:
                return httpx.Response(404, json={"error": "Category not found"})
            if category_id in self.conflicting_ids:
                return httpx.Response(409, json={"error": "Category was modified"})
            self.categories[category_id].update(
                title=params.get("title"), group=params.get("group"), status=params.get("status")
            )
            return httpx.Response(200, json={"id": category_id, "ok": True})

        return httpx.Response(404, json={"error": f"No route {request.method} {path}"})


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, notification: Dict[str, Any]) -> None:
        self.calls.append(notification)


@pytest.fixture
def settings() -> Settings:
    # init kwargs beat env / yaml, so tests do not depend on the host environment
    return Settings(
        PORT=3000,
        SERVER_HOST="localhost",
        API_PREFIX="/api/",
        IS_SERVER=False,
        BROWSER_ORIGIN=ORIGIN,
    )


@pytest.fixture
def api() -> FakeCategoryApi:
    return FakeCategoryApi()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest_asyncio.fixture
async def client(settings, api, notifier):
    async with ApiClient(
        settings,
        ExecutionEnvironment.browser(ORIGIN),
        notifier=notifier,
        transport=httpx.MockTransport(api),
    ) as c:
        yield c


@pytest_asyncio.fixture
async def server_client(settings, api, notifier):
    async with ApiClient(
        settings,
        ExecutionEnvironment.server(),
        notifier=notifier,
        transport=httpx.MockTransport(api),
    ) as c:
        yield c
