#!/usr/bin/env python3
"""Programmatic first-step generation example.

This demonstrates using the focus coach components directly:

* load settings from `.env`
* set a user's current task
* ask the configured model for a validated five-minute first step

The task and user are passed as arguments (not read from `.env`).
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from focus_coach.core.config import FocusConfig
from focus_coach.core.errors import ExtractionError, ValidationError
from focus_coach.core.logging import configure_logging
from focus_coach.focus.models import Task, format_focus
from focus_coach.focus.service import FocusService
from focus_coach.llm.factory import LLMFactory
from focus_coach.state.store import InMemoryFocusStore


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a first step (programmatic example).")
    parser.add_argument("--task", required=True, help='Task description, e.g. "Do my taxes"')
    parser.add_argument("--user", default="user123", help="User identity")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    config = FocusConfig()
    configure_logging(config.effective_log_level)

    service = FocusService(
        store=InMemoryFocusStore(),
        model=LLMFactory.create(config),
        model_timeout_seconds=config.model_timeout_seconds,
    )

    task = Task(description=args.task)
    service.set_current_task(args.user, task)
    print(format_focus(service.describe_focus(args.user)))

    try:
        await service.generate_first_step(args.user, task)
    except (ExtractionError, ValidationError) as exc:
        print(f"Model answer rejected: {exc}")
        return 1

    print(format_focus(service.describe_focus(args.user)))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    return asyncio.run(_run(_parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
