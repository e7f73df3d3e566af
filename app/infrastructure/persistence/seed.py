"""
Starter content: achievements, quiz sections and questions, one lesson
and its flashcards.

Rows are matched on their natural key (title, or term within a lesson),
so seeding twice inserts nothing the second time.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from app.infrastructure.persistence.models import (
    AchievementModel,
    FlashcardModel,
    LessonModel,
    QuizQuestionModel,
    QuizSectionModel,
)

logger = logging.getLogger(__name__)


ACHIEVEMENTS = [
    {
        "title": "First Steps",
        "description": "Complete your first lesson.",
        "requirement": {"type": "lessons_completed", "value": 1},
        "xp_reward": 50,
        "icon": "footprints",
    },
    {
        "title": "Dedicated Learner",
        "description": "Complete five lessons.",
        "requirement": {"type": "lessons_completed", "value": 5},
        "xp_reward": 200,
        "icon": "book-open",
    },
    {
        "title": "Rising Trader",
        "description": "Earn 500 XP.",
        "requirement": {"type": "xp_reached", "value": 500},
        "xp_reward": 100,
        "icon": "trending-up",
    },
    {
        "title": "Market Veteran",
        "description": "Reach level 5.",
        "requirement": {"type": "level_reached", "value": 5},
        "xp_reward": 500,
        "icon": "award",
    },
]

QUIZ_SECTIONS = [
    {
        "title": "Market Basics",
        "description": "Core vocabulary of the stock market.",
        "difficulty": "Beginner",
        "order": 1,
        "questions": [
            {
                "term": "Bull Market",
                "question": "What describes a bull market?",
                "correct_answer": "Prices are rising or expected to rise",
                "wrong_answers": [
                    "Prices are falling or expected to fall",
                    "Trading is suspended",
                    "Volume is unusually low",
                ],
            },
            {
                "term": "Bear Market",
                "question": "What describes a bear market?",
                "correct_answer": "Prices are falling or expected to fall",
                "wrong_answers": [
                    "Prices are rising or expected to rise",
                    "Only bonds can be traded",
                    "Interest rates are zero",
                ],
            },
            {
                "term": "Volume",
                "question": "What does trading volume measure?",
                "correct_answer": "The number of shares traded in a period",
                "wrong_answers": [
                    "The price change in a period",
                    "The number of listed companies",
                    "The total market capitalisation",
                ],
            },
        ],
    },
    {
        "title": "Order Types",
        "description": "How orders are placed and filled.",
        "difficulty": "Beginner",
        "order": 2,
        "questions": [
            {
                "term": "Market Order",
                "question": "What does a market order do?",
                "correct_answer": "Buys or sells immediately at the best available price",
                "wrong_answers": [
                    "Buys or sells only at a specified price or better",
                    "Cancels all open orders",
                    "Executes at the next day's open",
                ],
            },
            {
                "term": "Limit Order",
                "question": "What does a limit order do?",
                "correct_answer": "Buys or sells at a specified price or better",
                "wrong_answers": [
                    "Buys or sells immediately at any price",
                    "Limits the number of trades per day",
                    "Sells a position when it loses 10%",
                ],
            },
        ],
    },
]

STARTER_LESSON = {
    "title": "Introduction to Stock Markets",
    "description": (
        "Learn the basics of how stock markets work, including market structure, "
        "order types, and trading fundamentals"
    ),
    "difficulty": "Beginner",
    "xp_reward": 100,
    "order": 1,
    "content": (
        "# Introduction to Stock Markets\n\n"
        "## Learning Objectives\n"
        "- Understand what a stock represents\n"
        "- Tell a bull market from a bear market\n"
        "- Know the difference between market and limit orders\n\n"
        "## Introduction\n"
        "A stock is a share of ownership in a company. Stock exchanges match "
        "buyers and sellers and publish the prices at which they trade.\n\n"
        "## Core Concepts\n"
        "### Key Terms\n"
        "- **Bull market**: prices are rising or expected to rise.\n"
        "- **Bear market**: prices are falling or expected to fall.\n"
        "- **Volume**: the number of shares traded in a period.\n\n"
        "## Summary\n"
        "Start small, use limit orders when price matters, and keep learning.\n"
    ),
}

STARTER_FLASHCARDS = [
    ("Bull Market", "A market condition where prices are rising or expected to rise."),
    ("Bear Market", "A market condition where prices are falling or expected to fall."),
    (
        "Volume",
        "The total number of shares or contracts traded in a security or market "
        "during a given period.",
    ),
    (
        "Market Order",
        "An order to buy or sell a security immediately at the best available current price.",
    ),
    ("Limit Order", "An order to buy or sell a security at a specified price or better."),
]


@dataclass
class SeedReport:
    """Number of rows inserted per kind."""

    achievements: int = 0
    quiz_sections: int = 0
    quiz_questions: int = 0
    lessons: int = 0
    flashcards: int = 0


def _seed_achievements(session: Session, report: SeedReport) -> None:
    existing = set(session.scalars(select(AchievementModel.title)))
    for data in ACHIEVEMENTS:
        if data["title"] in existing:
            continue
        session.add(AchievementModel(**data))
        report.achievements += 1


def _seed_quiz(session: Session, report: SeedReport) -> None:
    for data in QUIZ_SECTIONS:
        section = session.scalar(
            select(QuizSectionModel).where(QuizSectionModel.title == data["title"])
        )
        if section is None:
            section = QuizSectionModel(
                title=data["title"],
                description=data["description"],
                difficulty=data["difficulty"],
                order=data["order"],
            )
            session.add(section)
            session.flush()
            report.quiz_sections += 1

        existing_terms = set(
            session.scalars(
                select(QuizQuestionModel.term).where(QuizQuestionModel.section_id == section.id)
            )
        )
        for question in data["questions"]:
            if question["term"] in existing_terms:
                continue
            session.add(
                QuizQuestionModel(
                    section_id=section.id,
                    difficulty=data["difficulty"],
                    xp_reward=10,
                    **question,
                )
            )
            report.quiz_questions += 1


def _seed_lesson(session: Session, report: SeedReport) -> None:
    lesson = session.scalar(
        select(LessonModel).where(LessonModel.title == STARTER_LESSON["title"])
    )
    if lesson is None:
        lesson = LessonModel(prerequisites=[], **STARTER_LESSON)
        session.add(lesson)
        session.flush()
        report.lessons += 1

    existing_terms = set(
        session.scalars(select(FlashcardModel.term).where(FlashcardModel.lesson_id == lesson.id))
    )
    for term, definition in STARTER_FLASHCARDS:
        if term in existing_terms:
            continue
        session.add(FlashcardModel(lesson_id=lesson.id, term=term, definition=definition))
        report.flashcards += 1


def seed(session_factory: sessionmaker[Session]) -> SeedReport:
    """Insert the starter content that is missing, in one transaction."""
    report = SeedReport()
    with session_factory.begin() as session:
        _seed_achievements(session, report)
        _seed_quiz(session, report)
        _seed_lesson(session, report)
    logger.info("Seed complete: %s", report)
    return report
