import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from content_api.config.settings import Settings, get_settings
from content_api.core.environment import ExecutionEnvironment
from content_api.core.exceptions import Conflict, RequestFailure
from content_api.execution.http_client import ApiClient
from content_api.models.category import CategoryStatus
from content_api.services.category import build_services

logger = logging.getLogger("content_api.cli")


def _dump(data: Any) -> None:
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json", exclude_unset=True)
    elif isinstance(data, list):
        data = [item.model_dump(mode="json", exclude_unset=True) if hasattr(item, "model_dump") else item for item in data]
    print(json.dumps(data, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="content-api", description="Category API client")
    p.add_argument("--server", action="store_true", help="Server execution context (loopback base URL, no toasts)")
    p.add_argument("--port", type=int, help="Service port for the server-side base URL")
    p.add_argument("--origin", help="Origin for the browser-relative /api/ base URL")

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List categories")

    get_p = sub.add_parser("get", help="Show one category")
    get_p.add_argument("id")

    create_p = sub.add_parser("create", help="Create a category")
    create_p.add_argument("--title", required=True)
    create_p.add_argument("--group", required=True)

    update_p = sub.add_parser("update", help="Update category info")
    update_p.add_argument("id")
    update_p.add_argument("--title", required=True)
    update_p.add_argument("--group", required=True)
    update_p.add_argument("--status", required=True, choices=[s.value for s in CategoryStatus])
    update_p.add_argument("--skip-conflict", action="store_true", help="Handle 409 here instead of notifying")

    return p


async def run(args: argparse.Namespace, settings: Settings) -> int:
    environment = ExecutionEnvironment.from_settings(settings)

    async with ApiClient(settings, environment) as client:
        services = build_services(client)
        try:
            if args.command == "list":
                _dump(await services.category.get_category_list())
            elif args.command == "get":
                _dump(await services.category.get_category_by_id(args.id))
            elif args.command == "create":
                _dump(await services.category.create_category(args.title, args.group))
            elif args.command == "update":
                skip = (409,) if args.skip_conflict else ()
                _dump(await services.category.update_category_info(
                    args.id, args.title, args.group, args.status, skip_error_codes=skip
                ))
        except Conflict as e:
            logger.error(f"Category was changed by someone else, reload and retry. ({e})")
            return 1
        except RequestFailure as e:
            logger.error(f"❌ {e}")
            return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: Dict[str, Any] = {}
    if args.server:
        overrides["IS_SERVER"] = True
    if args.port is not None:
        overrides["PORT"] = args.port
    if args.origin:
        overrides["BROWSER_ORIGIN"] = args.origin
    settings = Settings(**overrides) if overrides else get_settings()

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
