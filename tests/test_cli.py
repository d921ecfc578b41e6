import json

import httpx
import pytest

from content_api import cli
from content_api.config.settings import get_settings
from content_api.execution.http_client import ApiClient

from tests.conftest import ORIGIN


@pytest.fixture
def patched_cli(api, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("PORT", "IS_SERVER", "BROWSER_ORIGIN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        cli,
        "ApiClient",
        lambda settings, environment: ApiClient(settings, environment, transport=httpx.MockTransport(api)),
    )
    return api


def test_cli_list(patched_cli, capsys):
    patched_cli.add("A", "G1")

    assert cli.main(["--origin", ORIGIN, "list"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert [c["title"] for c in out] == ["A"]
    assert str(patched_cli.requests[0].url) == f"{ORIGIN}/api/categories"


def test_cli_server_mode_uses_port(patched_cli, capsys):
    assert cli.main(["--server", "--port", "4100", "create", "--title", "T", "--group", "G"]) == 0

    assert json.loads(capsys.readouterr().out) == "cat-1"
    assert str(patched_cli.requests[0].url).startswith("http://localhost:4100/api/category")


def test_cli_conflict_exit_code(patched_cli):
    category_id = patched_cli.add("Old", "G")
    patched_cli.conflicting_ids.add(category_id)

    code = cli.main([
        "--origin", ORIGIN, "update", category_id,
        "--title", "New", "--group", "G", "--status", "CategoryWIP", "--skip-conflict",
    ])

    assert code == 1


def test_cli_not_found_exit_code(patched_cli):
    assert cli.main(["--origin", ORIGIN, "get", "missing"]) == 1


def test_cli_without_overrides_uses_cached_settings(patched_cli, monkeypatch, capsys):
    monkeypatch.setenv("BROWSER_ORIGIN", ORIGIN)
    get_settings.cache_clear()
    try:
        assert cli.main(["list"]) == 0
        assert cli.main(["list"]) == 0
        assert get_settings.cache_info().hits >= 1
    finally:
        get_settings.cache_clear()

    assert str(patched_cli.requests[0].url) == f"{ORIGIN}/api/categories"
