import argparse
import logging
import sys
from pathlib import Path

from src.adapters.clock import SystemClock
from src.app_shell.config import get_rules_path, validate_tax_rules
from src.components.tax import TaxInput, run_calculate
from src.components.users import UpdateUserInput, create_user, run_update
from src.rules.loader import load_rules
from src.rules.models import Rules

logger = logging.getLogger("cli")


def get_rules(path: Path) -> Rules:
    try:
        rules = load_rules(path)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load rules: {e}")
        sys.exit(1)

    validate_tax_rules(rules)
    return rules


def handle_demo(rules: Rules) -> None:
    demo = rules.demo

    result = run_calculate(TaxInput(income=demo.income), rules.tax)
    if not result.success:
        logger.error(result.error)
        sys.exit(1)
    print(result.payment)

    user = create_user(demo.user_id, demo.initial_item, SystemClock())
    run_update(UpdateUserInput(user=user, item=demo.replacement_item))
    print(user.id)


def handle_tax(rules: Rules, args: argparse.Namespace) -> None:
    result = run_calculate(TaxInput(income=args.income, tax_year=args.tax_year), rules.tax)
    if not result.success:
        logger.error(result.error)
        sys.exit(1)
    print(result.payment)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Little Tax Lab CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $LTL_RULES_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # demo
    subparsers.add_parser("demo", help="Calculate a payment and update a user")

    # tax
    tax_parser = subparsers.add_parser("tax", help="Calculate the payment for an income")
    tax_parser.add_argument("income", type=float, help="Gross income")
    tax_parser.add_argument("--tax-year", type=int, default=None, help="Tax year")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    rules = get_rules(get_rules_path(args.rules))

    if args.command == "demo":
        handle_demo(rules)
    elif args.command == "tax":
        handle_tax(rules, args)


if __name__ == "__main__":
    main()
