"""
Command line interface for beanflow.

Each subcommand performs one explicit round trip against a training
session configured in a YAML file (see ``config.example.yaml``) and
prints the resulting state record as JSON:

* ``state`` fetches the current state without advancing.
* ``advance`` submits an event/barrier pair plus any extra fields.
* ``navigate`` fetches the current state and submits one of its
  navigators by name.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Dict, List, Tuple

from .config import SessionConfig, check_log_level, load_config
from .errors import BeanflowError
from .normalize.schema import StateRecord
from .session.controller import TrainingSession

logger = logging.getLogger("beanflow.cli")


def _parse_fields(pairs: List[str]) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        fields[key] = value
    return fields


def _print_record(tag: str, record: StateRecord) -> None:
    print(json.dumps({"event": tag, "record": record.to_dict()}, indent=2, ensure_ascii=False))


def _open_session(config: SessionConfig) -> TrainingSession:
    return TrainingSession(config.session_id, config.auth_token, base_url=config.base_url)


async def _state(config: SessionConfig) -> Tuple[str, StateRecord]:
    async with _open_session(config) as session:
        return await session.refresh_state()


async def _advance(config: SessionConfig, advancement: Dict[str, str], time_on_page: int) -> Tuple[str, StateRecord]:
    async with _open_session(config) as session:
        return await session.advance(advancement, time_on_page)


async def _navigate(config: SessionConfig, name: str, time_on_page: int) -> Tuple[str, StateRecord]:
    async with _open_session(config) as session:
        _, current = await session.refresh_state()
        return await session.advance_navigator(name, current, time_on_page)


def cmd_state(args: argparse.Namespace, config: SessionConfig) -> None:
    """Print the current state."""
    _print_record(*asyncio.run(_state(config)))


def cmd_advance(args: argparse.Namespace, config: SessionConfig) -> None:
    """Submit one advancement and print the resulting state."""
    advancement = _parse_fields(args.field or [])
    advancement["event"] = args.event
    advancement["barrier"] = args.barrier
    time_on_page = args.time_on_page if args.time_on_page is not None else config.time_on_page
    _print_record(*asyncio.run(_advance(config, advancement, time_on_page)))


def cmd_navigate(args: argparse.Namespace, config: SessionConfig) -> None:
    """Follow a navigator of the current state by name."""
    time_on_page = args.time_on_page if args.time_on_page is not None else config.time_on_page
    _print_record(*asyncio.run(_navigate(config, args.name, time_on_page)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="beanflow", description="Drive a vocabulary training session")
    parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
    parser.add_argument("--log-level", help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    state_cmd = subparsers.add_parser("state", help="Print the current training state")
    state_cmd.set_defaults(func=cmd_state)

    advance_cmd = subparsers.add_parser("advance", help="Submit an advancement")
    advance_cmd.add_argument("--event", required=True, help="Event name to submit")
    advance_cmd.add_argument("--barrier", required=True, help="Barrier token from the current state")
    advance_cmd.add_argument(
        "--field", action="append", metavar="KEY=VALUE", help="Extra form field (repeatable)"
    )
    advance_cmd.add_argument("--time-on-page", type=int, dest="time_on_page", help="Seconds spent on the page")
    advance_cmd.set_defaults(func=cmd_advance)

    nav_cmd = subparsers.add_parser("navigate", help="Follow a navigator of the current state")
    nav_cmd.add_argument("name", help="Navigator name as printed in the record's nav map")
    nav_cmd.add_argument("--time-on-page", type=int, dest="time_on_page", help="Seconds spent on the page")
    nav_cmd.set_defaults(func=cmd_navigate)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args.config)
        logging.basicConfig(
            level=check_log_level(args.log_level or config.log_level),
            format="[%(levelname)s] %(message)s",
        )
        args.func(args, config)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except BeanflowError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
