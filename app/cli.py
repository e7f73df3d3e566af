"""
Command line entry point for database and content maintenance.

Usage:
    # Create missing tables
    python -m app.cli migrate

    # Insert starter achievements, quizzes, lesson and flashcards
    python -m app.cli seed

    # Write the default curriculum with the LLM (existing titles are skipped)
    python -m app.cli generate-lessons

    # Write a single lesson
    python -m app.cli generate-lessons --title "Options Basics" --difficulty Advanced --order 10
"""

import argparse
import logging
import sys

from app.application.advisor.dtos import GenerateLessonCommand
from app.application.advisor.generate_lesson import GenerateLessonUseCase
from app.core.config import settings
from app.domain.errors import UpstreamServiceError
from app.infrastructure.advisor.openai_chat_adapter import OpenAIChatAdapter
from app.infrastructure.advisor.prompt_loader import get_prompt_loader
from app.infrastructure.learning.lesson_repository import LessonRepositoryAdapter
from app.infrastructure.persistence.database import get_engine, get_session_factory
from app.infrastructure.persistence.migrations import migrate
from app.infrastructure.persistence.seed import seed
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_CURRICULUM = (
    GenerateLessonCommand(
        title="Introduction to Stock Markets",
        description=(
            "Learn the basics of how stock markets work, including market "
            "structure, order types, and trading fundamentals"
        ),
        difficulty="Beginner",
        order=1,
    ),
    GenerateLessonCommand(
        title="Understanding Order Types",
        description="Market, limit and stop orders and when to use each",
        difficulty="Beginner",
        order=2,
    ),
    GenerateLessonCommand(
        title="Reading Candlestick Charts",
        description="How to read price action from OHLC candles and common patterns",
        difficulty="Intermediate",
        order=3,
        xp_reward=150,
    ),
    GenerateLessonCommand(
        title="Risk Management and Position Sizing",
        description="Protecting capital with stop losses, sizing rules and diversification",
        difficulty="Intermediate",
        order=4,
        xp_reward=150,
    ),
)


def cmd_migrate(args: argparse.Namespace) -> int:
    """Create any missing tables."""
    created = migrate(get_engine())
    if created:
        logger.info("Created tables: %s", ", ".join(created))
    else:
        logger.info("Schema already up to date.")
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    """Insert starter content."""
    report = seed(get_session_factory())
    logger.info(
        "Seeded %d achievements, %d quiz sections, %d questions, %d lessons, %d flashcards.",
        report.achievements,
        report.quiz_sections,
        report.quiz_questions,
        report.lessons,
        report.flashcards,
    )
    return 0


def cmd_generate_lessons(args: argparse.Namespace) -> int:
    """Generate lessons with the LLM; a failed lesson does not stop the rest."""
    if args.title:
        commands = [
            GenerateLessonCommand(
                title=args.title,
                description=args.description or args.title,
                difficulty=args.difficulty,
                order=args.order,
                xp_reward=args.xp_reward,
            )
        ]
    else:
        commands = list(DEFAULT_CURRICULUM)

    use_case = GenerateLessonUseCase(
        llm=OpenAIChatAdapter(
            api_key=settings.openai_api_key,
            base_url=settings.llm_base_url,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            timeout=settings.llm_timeout_seconds,
        ),
        prompts=get_prompt_loader(),
        lesson_repo=LessonRepositoryAdapter(get_session_factory()),
        model=settings.lesson_model,
    )

    failures = 0
    for command in commands:
        try:
            use_case.execute(command)
        except UpstreamServiceError as exc:
            failures += 1
            logger.error("Failed to generate lesson %r: %s (%s)", command.title, exc.message, exc.reason)
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="marketmentor", description="MarketMentor maintenance")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Create missing tables").set_defaults(func=cmd_migrate)
    subparsers.add_parser("seed", help="Insert starter content").set_defaults(func=cmd_seed)

    generate = subparsers.add_parser("generate-lessons", help="Write lessons with the LLM")
    generate.add_argument("--title", help="Generate only this lesson")
    generate.add_argument("--description", help="Lesson description (defaults to the title)")
    generate.add_argument("--difficulty", default="Beginner")
    generate.add_argument("--order", type=int, default=100)
    generate.add_argument("--xp-reward", type=int, default=100)
    generate.set_defaults(func=cmd_generate_lessons)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
