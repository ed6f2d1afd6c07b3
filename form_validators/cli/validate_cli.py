"""
Command-line interface for validating HTML forms.

Usage:
    form-validators validate --input <file.html> [options]
    form-validators rules [--config <options.yaml>]
"""

import argparse
import json
import sys
from pathlib import Path

from form_validators.core.form import FormDocument
from form_validators.core.rules import DEFAULT_OPTIONS, RuleConfigLoader, RulePipeline
from form_validators.observability.logger import get_logger


logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def load_options(args):
    """
    Build validator options from --config and --strong-password.

    Args:
        args: Command-line arguments

    Returns:
        ValidatorOptions
    """
    options = RuleConfigLoader(args.config).load_options() if args.config else DEFAULT_OPTIONS
    if getattr(args, "strong_password", False):
        options = options.model_copy(update={"is_strong_password": True})
    return options


def validate_command(args) -> int:
    """
    Validate one form of an HTML file.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return EXIT_ERROR

    try:
        options = load_options(args)
        data = json.loads(Path(args.data).read_text()) if args.data else None
        if data is not None and not isinstance(data, dict):
            raise ValueError("--data must hold a JSON object keyed by input name")
        document = FormDocument(input_path.read_text())
        plugin = document.attach(
            args.form_selector,
            options=options,
            scope=args.scope,
            aggregate=args.aggregate,
        )
    except (FileNotFoundError, LookupError, ValueError) as e:
        logger.error(f"Cannot validate {args.input}: {e}")
        return EXIT_ERROR

    outcome = plugin.submit(data)

    rendered = document.render()
    if args.output:
        Path(args.output).write_text(rendered)
    else:
        sys.stdout.write(rendered)

    for field_result in outcome.result.errors:
        logger.warning(
            f"{field_result.field.name or '<unnamed>'}: {field_result.message}",
            extra={"rule": field_result.rule_name},
        )

    return EXIT_VALID if outcome.valid else EXIT_INVALID


def rules_command(args) -> int:
    """
    Print the effective rule summary as JSON.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    try:
        options = load_options(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot load options: {e}")
        return EXIT_ERROR

    summary = RulePipeline(options).get_rule_summary()
    sys.stdout.write(json.dumps(summary, indent=2) + "\n")
    return EXIT_VALID


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="form-validators",
        description="Validate HTML forms against named field rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate the first form of a page, print annotated markup
  form-validators validate --input signup.html

  # Apply submitted data and custom options, write the result to a file
  form-validators validate --input signup.html --data posted.json \\
      --config config/validators.yaml --output signup.checked.html

  # Show the effective rules with the strong password toggle
  form-validators rules --strong-password
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a form in an HTML file")
    validate_parser.add_argument(
        "--input",
        required=True,
        help="Path to the HTML file"
    )
    validate_parser.add_argument(
        "--config",
        help="Path to validator options YAML file"
    )
    validate_parser.add_argument(
        "--form-selector",
        default="form",
        help="CSS selector of the form to validate (default: form)"
    )
    validate_parser.add_argument(
        "--data",
        help="Path to a JSON object of submitted values, keyed by input name"
    )
    validate_parser.add_argument(
        "--scope",
        default="form",
        choices=["form", "page"],
        help="Check inputs inside the form only, or every input on the page (default: form)"
    )
    validate_parser.add_argument(
        "--aggregate",
        default="all",
        choices=["all", "last"],
        help="Pass when all fields pass, or report the last field's result (default: all)"
    )
    validate_parser.add_argument(
        "--strong-password",
        action="store_true",
        help="Require strong passwords"
    )
    validate_parser.add_argument(
        "--output",
        help="Write annotated HTML here instead of stdout"
    )

    rules_parser = subparsers.add_parser("rules", help="Show the effective rules")
    rules_parser.add_argument(
        "--config",
        help="Path to validator options YAML file"
    )
    rules_parser.add_argument(
        "--strong-password",
        action="store_true",
        help="Require strong passwords"
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate":
        return validate_command(args)
    if args.command == "rules":
        return rules_command(args)

    parser.print_help()
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
