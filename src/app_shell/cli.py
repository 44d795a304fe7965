import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from src.adapters.rules_adapter import RulesAdapter
from src.components.adf import (
    CheckLimitsInput,
    ValidateADFInput,
    run_check_limits,
    run_validate,
)
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> RulesAdapter:
    if not Path(path).exists():
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)

    return RulesAdapter(load_rules(Path(path)))


def read_document(path: str) -> Any:
    if path == "-":
        source = sys.stdin.read()
    else:
        source = Path(path).read_text(encoding="utf-8")

    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        logger.error(f"{path} is not valid JSON: {e}")
        sys.exit(2)


def handle_validate(args: argparse.Namespace) -> int:
    rules = None if args.no_limits else get_rules(args.rules)
    result = run_validate(ValidateADFInput(document=read_document(args.file)), rules=rules)

    error = result.error
    if error is None:
        print(f"{args.file}: valid")
        return 0

    if args.json:
        print(json.dumps(error.to_dict()))
    else:
        print(f"{args.file}: invalid at {error.path}: {error.message}")
        if error.details:
            print(f"  {error.details}")
    return 1


def handle_limits(args: argparse.Namespace) -> int:
    rules = get_rules(args.rules)
    result = run_check_limits(CheckLimitsInput(document=read_document(args.file)), rules=rules)

    print(f"{args.file}: depth {result.depth}")
    if result.error is not None:
        print(f"  {result.error.path}: {result.error.message}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Issue Docs Lab CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate an ADF JSON file")
    validate_parser.add_argument("file", help="Path to JSON file, or - for stdin")
    validate_parser.add_argument(
        "--no-limits", action="store_true", help="Skip size/depth caps from rules"
    )
    validate_parser.add_argument(
        "--json", action="store_true", help="Print the error as JSON"
    )

    # limits
    limits_parser = subparsers.add_parser("limits", help="Check size/depth caps only")
    limits_parser.add_argument("file", help="Path to JSON file, or - for stdin")

    args = parser.parse_args(argv)

    if args.command == "validate":
        return handle_validate(args)
    elif args.command == "limits":
        return handle_limits(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
