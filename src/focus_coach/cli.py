"""CLI entrypoint for the focus coach."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError as ConfigError

from focus_coach import __version__
from focus_coach.core.config import FocusConfig
from focus_coach.core.errors import (
    ExtractionError,
    ModelInvocationError,
    PreconditionError,
    ValidationError,
)
from focus_coach.core.logging import configure_logging
from focus_coach.focus.extraction import extract_suggestion
from focus_coach.focus.models import Task, format_focus
from focus_coach.focus.prompt import build_first_step_prompt
from focus_coach.focus.service import FocusService
from focus_coach.focus.validators import validate_suggestion
from focus_coach.llm.factory import LLMFactory
from focus_coach.state.store import InMemoryFocusStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2
EXIT_PRECONDITION = 3
EXIT_MODEL = 4
EXIT_EXTRACTION = 5
EXIT_VALIDATION = 6


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="focus-coach",
        description="Get one small, validated first step for the task you are avoiding",
    )
    parser.add_argument("--version", action="version", version=f"focus-coach {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest = subparsers.add_parser(
        "suggest", help="Set a task as current focus and ask the model for a first step"
    )
    suggest.add_argument("--task", required=True, help="Task description")
    suggest.add_argument("--user", default="local", help="User identity (default: local)")

    prompt = subparsers.add_parser("prompt", help="Print the model instruction for a task")
    prompt.add_argument("--task", required=True, help="Task description")

    validate = subparsers.add_parser(
        "validate",
        help="Run the quality checks on a suggestion (or on a raw JSON model response)",
    )
    validate.add_argument("text", help="Suggestion text or raw model output")

    return parser


def _check_text(text: str) -> int:
    try:
        candidate = extract_suggestion(text) if "{" in text else text
        validate_suggestion(candidate)
    except ExtractionError as e:
        print(f"Extraction failed: {e}", file=sys.stderr)
        return EXIT_EXTRACTION
    except ValidationError as e:
        print(f"FAILED {e.validator}: {e.detail}", file=sys.stderr)
        return EXIT_VALIDATION
    print(f"OK: {candidate}")
    return EXIT_OK


async def _suggest(config: FocusConfig, user_id: str, task: Task) -> None:
    service = FocusService(
        store=InMemoryFocusStore(),
        model=LLMFactory.create(config),
        model_timeout_seconds=config.model_timeout_seconds,
    )
    service.set_current_task(user_id, task)
    await service.generate_first_step(user_id, task)
    print(format_focus(service.describe_focus(user_id)))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        task = Task(description=args.task) if hasattr(args, "task") else None
    except ValueError as e:
        parser.error(str(e))

    if args.command == "prompt":
        print(build_first_step_prompt(task))
        return EXIT_OK

    if args.command == "validate":
        return _check_text(args.text)

    try:
        config = FocusConfig()
    except ConfigError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_CONFIG

    configure_logging(config.effective_log_level)

    try:
        if args.command == "suggest":
            asyncio.run(_suggest(config, args.user, task))
            return EXIT_OK

        logger.error("Unknown command", extra={"command": args.command})
        return EXIT_CONFIG

    except PreconditionError as e:
        print(str(e), file=sys.stderr)
        return EXIT_PRECONDITION

    except ModelInvocationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_MODEL

    except ExtractionError as e:
        print(str(e), file=sys.stderr)
        return EXIT_EXTRACTION

    except ValidationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_VALIDATION

    except ValueError as e:
        # Provider construction (missing API key, model path, ...).
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    except Exception:
        logger.exception("Command failed")
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
