# -*- coding: utf-8 -*-
"""SmartCapital local assistant CLI.

Runs the chat intent parser and validators without LINE, printing JSON so the
results can be inspected or piped into other tools.

    python -m smartcapital.assistant_cli classify --text "買 2330"
    python -m smartcapital.assistant_cli validate-amount 120.5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Any

from smartcapital import config
from smartcapital.line.formatters import format_reply
from smartcapital.parser import ValidationResult, get_default_classifier, validate_amount, validate_quantity

logger = logging.getLogger(__name__)


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _decimal_arg(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def cmd_classify(args: argparse.Namespace) -> int:
    rule, intent = get_default_classifier().explain(args.text)
    payload: dict[str, Any] = {"status": "ok", "intent": intent.to_dict()}
    if args.explain:
        payload["rule"] = rule
    if args.reply:
        payload["reply"] = format_reply(intent)
    _print_json(payload)
    return 0


def _print_validation(result: ValidationResult) -> int:
    if result.valid:
        _print_json({"status": "ok", "valid": True})
        return 0
    _print_json({"status": "invalid", "valid": False, "error": result.error})
    return 1


def cmd_validate_amount(args: argparse.Namespace) -> int:
    return _print_validation(validate_amount(args.value))


def cmd_validate_quantity(args: argparse.Namespace) -> int:
    return _print_validation(validate_quantity(args.value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="assistant_cli", description="SmartCapital local assistant CLI")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    classify_cmd = sub.add_parser("classify", help="Classify one chat message into an intent")
    classify_cmd.add_argument("--text", required=True)
    classify_cmd.add_argument("--explain", action="store_true", help="Include the rule that matched")
    classify_cmd.add_argument("--reply", action="store_true", help="Include the LINE reply text")
    classify_cmd.set_defaults(func=cmd_classify)

    amount_cmd = sub.add_parser("validate-amount", help="Bound-check a ledger amount")
    amount_cmd.add_argument("value", type=_decimal_arg)
    amount_cmd.set_defaults(func=cmd_validate_amount)

    quantity_cmd = sub.add_parser("validate-quantity", help="Bound-check a share quantity")
    quantity_cmd.add_argument("value", type=_decimal_arg)
    quantity_cmd.set_defaults(func=cmd_validate_quantity)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=str(args.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
