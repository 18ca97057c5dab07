"""CLI for generating a batch of codes from a YAML recipe.

Usage Examples:

    # 100 codes shaped like ABCD-EFGH, no ambiguous characters
    codeforge-generate --config recipes/vouchers.yaml --quantity 100 --output codes.txt

    # Defaults: 42 random 8-character codes printed to stdout
    codeforge-generate

Recipe format:

    quantity: 100
    generator: random
    configuration:
      pattern: "XXXX-XXXX"
      prefix: "PROMO-"
    validators:
      max_repeated_characters: {max_repeats: 2}
      forbidden_words: {words: ["KILL", "DEAD"]}
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from codeforge.core.config_loader import ConfigLoader
from codeforge.core.exceptions import CodeGenerationError
from codeforge.core.models import GenerationRequest
from codeforge.factory import build_manager
from codeforge.settings import LOG_LEVELS, Settings
from codeforge.utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate unique, validated codes")
    parser.add_argument("--config", type=Path, help="Path to YAML recipe")
    parser.add_argument("--quantity", type=int, help="Number of codes (overrides recipe)")
    parser.add_argument("--generator", help="Generator alias (overrides recipe)")
    parser.add_argument("--timeout", type=float, help="Give up after this many seconds")
    parser.add_argument("--output", type=Path, help="Write codes to this file instead of stdout")
    parser.add_argument(
        "--log-level",
        help=f"One of {', '.join(LOG_LEVELS)} (default from CODEFORGE_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    load_dotenv()
    logger = setup_logger("codeforge", level="INFO")

    try:
        overrides = {"log_level": args.log_level} if args.log_level else {}
        settings = Settings(**overrides)
        logger.setLevel(settings.log_level)

        request = ConfigLoader.load_request(args.config) if args.config else GenerationRequest()
        if args.quantity is not None:
            request = request.model_copy(update={"quantity": args.quantity})
        if args.generator:
            request = request.model_copy(update={"generator": args.generator})

        manager = build_manager(settings=settings)
        codes = manager.generate(
            quantity=request.quantity,
            configuration=request.configuration,
            generator_alias=request.generator,
            validators=request.validators,
            timeout=args.timeout,
        )
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        return 1
    except CodeGenerationError as e:
        logger.error(f"Code generation failed: {e}")
        return 1

    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text("".join(f"{code}\n" for code in codes))
        except OSError as e:
            logger.error(f"Could not write codes to {args.output}: {e}")
            return 1
        logger.info(f"Saved {len(codes)} codes to {args.output}")
    else:
        for code in codes:
            print(code)

    return 0


if __name__ == "__main__":
    sys.exit(main())
