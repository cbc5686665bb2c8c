"""
Command-line interface for calling single PayLane REST operations.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, TextIO, Tuple

import requests

from .api import create_rest_client
from .core import OPERATIONS, ConfigError, PaylaneError, UnknownOperationError, load_client_config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paylane",
        description="Call a single PayLane REST API operation",
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation name, e.g. cardSale or card_sale",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYLANE_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Disable TLS certificate verification (test servers only)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available operations and exit",
    )
    params = parser.add_mutually_exclusive_group()
    params.add_argument(
        "--params",
        metavar="JSON",
        help="Request parameters as a JSON object",
    )
    params.add_argument(
        "--params-file",
        metavar="PATH",
        help="Read request parameters from a JSON file ('-' for stdin)",
    )
    return parser


def _load_params(args: argparse.Namespace, stdin: TextIO) -> Dict[str, Any]:
    if args.params is not None:
        raw = args.params
    elif args.params_file == "-":
        raw = stdin.read()
    elif args.params_file is not None:
        raw = Path(args.params_file).read_text(encoding="utf-8")
    else:
        return {}

    params = json.loads(raw)
    if not isinstance(params, dict):
        raise ValueError("Request parameters must be a JSON object")
    return params


def _print_operations(out: TextIO) -> None:
    width = max(len(operation.name) for operation in OPERATIONS)
    for operation in OPERATIONS:
        out.write(f"{operation.name:<{width}}  {operation.verb:<6} {operation.path}\n")


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    session: Optional[requests.Session] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.list:
        _print_operations(stdout)
        return 0
    if not args.operation:
        parser.error("an operation name is required unless --list is given")

    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    try:
        params = _load_params(args, stdin)
    except (OSError, ValueError) as exc:
        logging.error("Invalid request parameters: %s", exc)
        return 1

    with create_rest_client(config=config, session=session) as client:
        if args.insecure:
            client.set_ssl_verify(False)
        try:
            result = client.invoke_result(args.operation, params)
        except UnknownOperationError as exc:
            logging.error("%s (use --list to see the available operations)", exc)
            return 1
        except PaylaneError as exc:
            logging.error("Request failed: %s", exc)
            return 1
        except ValueError as exc:
            logging.error("Invalid request parameters: %s", exc)
            return 1

    json.dump(result.data, stdout, indent=2, sort_keys=True)
    stdout.write("\n")

    if not result.success:
        logging.error("Operation %s did not succeed", args.operation)
        return 1
    return 0


def main() -> None:
    sys.exit(run_cli())
