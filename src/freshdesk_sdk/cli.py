#!/usr/bin/env python3
"""
Freshdesk SDK CLI

Command-line interface for issuing single calls against the Freshdesk API,
e.g. ``freshdesk-sdk tickets view 42``.
"""

import argparse
import json
import logging
from pathlib import Path

from .api import Api
from .exceptions import ApiError, FreshdeskError
from .models import ApiConfig
from .resources import Resource


def setup_logging(debug: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _parse_arg(value: str):
    """Positional ids are ints; anything else is passed through as text."""
    try:
        return int(value)
    except ValueError:
        return value


def _load_data(value: str):
    if value.startswith("@"):
        value = Path(value[1:]).read_text(encoding="utf-8")
    return json.loads(value)


def _parse_query(pairs: list[str]) -> dict:
    query = {}
    for pair in pairs:
        key, sep, val = pair.partition("=")
        if not sep:
            raise ValueError(f"Query parameter must be key=value: {pair!r}")
        query[key] = val
    return query


def build_config(args) -> ApiConfig:
    overrides = {
        "api_key": args.api_key,
        "domain": args.domain,
        "base_url": args.base_url,
    }
    if args.config:
        return ApiConfig.from_yaml(args.config, **overrides)
    return ApiConfig.from_env(**overrides)


def _resolve_action(api: Api, resource_name: str, action_name: str):
    resource = getattr(api, resource_name, None)
    if not isinstance(resource, Resource):
        raise ValueError(f"Unknown resource: {resource_name}")
    action = getattr(resource, action_name, None)
    if action_name.startswith("_") or not callable(action):
        raise ValueError(f"Unknown action for {resource_name}: {action_name}")
    return action


def handle_call(args) -> int:
    """Handle a single resource call."""
    try:
        config = build_config(args)
        with Api.from_config(config) as api:
            action = _resolve_action(api, args.resource, args.action)
            call_args = [_parse_arg(a) for a in args.args]
            if args.data is not None:
                call_args.append(_load_data(args.data))
            kwargs = {}
            if args.query:
                kwargs["query"] = _parse_query(args.query)

            result = action(*call_args, **kwargs)

        if result is not None:
            print(json.dumps(result, indent=2, ensure_ascii=False))
        return 0

    except ApiError as e:
        print(f"❌ API error: {e}")
        if e.response_body:
            print(json.dumps(e.response_body, indent=2, ensure_ascii=False)
                  if not isinstance(e.response_body, str) else e.response_body)
        return 1
    except FreshdeskError as e:
        print(f"❌ Error: {e}")
        return 1
    except (ValueError, TypeError, OSError) as e:
        print(f"❌ Invalid arguments: {e}")
        return 2


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="freshdesk-sdk",
        description="Call a Freshdesk API resource from the command line"
    )

    # Global options
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=Path, help="YAML file with api_key/domain/base_url/timeout")
    parser.add_argument("--api-key", help="Freshdesk API key (or set FRESHDESK_API_KEY env var)")
    parser.add_argument("--domain", help="Freshdesk subdomain (or set FRESHDESK_DOMAIN env var)")
    parser.add_argument("--base-url", help="Full API base URL (or set FRESHDESK_BASE_URL env var)")
    parser.add_argument("--data", help="JSON payload, or @path to a JSON file")
    parser.add_argument("--query", action="append", default=[], metavar="KEY=VALUE",
                        help="Query parameter; can repeat")

    parser.add_argument("resource", help="Resource name, e.g. tickets, contacts, time_entries")
    parser.add_argument("action", help="Resource method, e.g. all, view, create")
    parser.add_argument("args", nargs="*", help="Positional arguments such as ids")

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.debug)

    return handle_call(args)


if __name__ == "__main__":
    raise SystemExit(main())
