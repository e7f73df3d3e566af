"""
Tests for the SQLAlchemy repositories against in-memory SQLite.

Covers the transactional sequences: like/unlike with the counter,
lesson completion with XP and achievements, quiz submission and the
flashcard schedule, plus migration and seeding.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from app.domain.identity.entities import ProfileChanges
from app.domain.identity.errors import UserNotFoundError, UsernameTakenError
from app.domain.learning.errors import (
    FlashcardNotFoundError,
    FlashcardProgressNotFoundError,
    LessonAlreadyCompletedError,
    LessonNotFoundError,
    ProgressAlreadyInitializedError,
    QuestionNotFoundError,
)
from app.domain.learning.entities import NewLesson
from app.domain.social.entities import NewPost
from app.domain.social.errors import PostNotFoundError
from app.infrastructure.identity.user_repository import UserRepositoryAdapter
from app.infrastructure.learning.flashcard_repository import FlashcardRepositoryAdapter
from app.infrastructure.learning.lesson_repository import LessonRepositoryAdapter
from app.infrastructure.learning.quiz_repository import QuizRepositoryAdapter
from app.infrastructure.persistence.database import build_engine
from app.infrastructure.persistence.migrations import migrate
from app.infrastructure.persistence.models import LessonModel, QuizQuestionModel
from app.infrastructure.persistence.seed import STARTER_FLASHCARDS, seed
from app.infrastructure.social.post_repository import PostRepositoryAdapter

NOW = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


def _user_id(factory: sessionmaker[Session], username: str = "alice") -> int:
    return UserRepositoryAdapter(factory).create(username, "hash").id


# ══════════════════════════════════════════════════════════════════════
# Schema and seed data
# ══════════════════════════════════════════════════════════════════════


class TestMigrateAndSeed:
    """Tests for migrate() and seed()."""

    def test_migrate_is_idempotent(self) -> None:
        engine = build_engine("sqlite://")
        created = migrate(engine)
        assert "users" in created
        assert "flashcard_progress" in created
        assert migrate(engine) == []

    def test_seed_twice_inserts_once(self, session_factory: sessionmaker[Session]) -> None:
        first = seed(session_factory)
        second = seed(session_factory)
        assert first.achievements == 4
        assert first.quiz_questions == 5
        assert first.flashcards == len(STARTER_FLASHCARDS)
        assert second.achievements == second.quiz_questions == second.flashcards == 0


# ══════════════════════════════════════════════════════════════════════
# Identity
# ══════════════════════════════════════════════════════════════════════


class TestUserRepositoryAdapter:
    """Tests for UserRepositoryAdapter."""

    def test_new_user_starts_at_level_one(self, session_factory: sessionmaker[Session]) -> None:
        user = UserRepositoryAdapter(session_factory).create("alice", "hash")
        assert (user.xp, user.level) == (0, 1)
        assert user.created_at is not None
        assert user.created_at.tzinfo is not None

    def test_duplicate_username(self, session_factory: sessionmaker[Session]) -> None:
        """The unique index rejects a second user with the same name."""
        repo = UserRepositoryAdapter(session_factory)
        repo.create("alice", "hash")
        with pytest.raises(UsernameTakenError):
            repo.create("alice", "other")

    def test_update_profile_partial(self, session_factory: sessionmaker[Session]) -> None:
        repo = UserRepositoryAdapter(session_factory)
        user_id = repo.create("alice", "hash").id
        repo.update_profile(user_id, ProfileChanges(bio="Hi", display_name="Alice"))
        user = repo.update_profile(user_id, ProfileChanges(bio="Updated"))
        assert user.bio == "Updated"
        assert user.display_name == "Alice"

    def test_update_unknown_user(self, session_factory: sessionmaker[Session]) -> None:
        with pytest.raises(UserNotFoundError):
            UserRepositoryAdapter(session_factory).update_profile(99, ProfileChanges(bio="x"))


# ══════════════════════════════════════════════════════════════════════
# Social
# ══════════════════════════════════════════════════════════════════════


class TestPostRepositoryAdapter:
    """Tests for PostRepositoryAdapter."""

    def test_feed_newest_first_with_comments(self, session_factory: sessionmaker[Session]) -> None:
        alice = _user_id(session_factory, "alice")
        bob = _user_id(session_factory, "bob")
        repo = PostRepositoryAdapter(session_factory)
        older = repo.create(alice, NewPost(content="first", type="text"))
        newer = repo.create(bob, NewPost(content="second", type="trade", stock_symbol="AAPL"))
        repo.add_comment(older.id, bob, "one")
        repo.add_comment(older.id, alice, "two")

        feed = repo.feed(alice)

        assert [p.id for p in feed] == [newer.id, older.id]
        assert feed[0].author.username == "bob"
        assert [c.content for c in feed[1].comments] == ["one", "two"]
        assert feed[1].comment_count == 2
        assert feed[1].comments[0].author.username == "bob"

    def test_comment_on_missing_post(self, session_factory: sessionmaker[Session]) -> None:
        alice = _user_id(session_factory)
        with pytest.raises(PostNotFoundError):
            PostRepositoryAdapter(session_factory).add_comment(404, alice, "hello")

    def test_like_counts_once_per_user(self, session_factory: sessionmaker[Session]) -> None:
        """Liking twice leaves the count at one."""
        alice = _user_id(session_factory, "alice")
        bob = _user_id(session_factory, "bob")
        repo = PostRepositoryAdapter(session_factory)
        post = repo.create(alice, NewPost(content="hello", type="text"))

        assert repo.like(post.id, bob).like_count == 1
        state = repo.like(post.id, bob)
        assert (state.like_count, state.liked) == (1, True)
        assert repo.like(post.id, alice).like_count == 2

        by_bob = {p.id: p for p in repo.feed(bob)}[post.id]
        assert by_bob.liked_by_me is True
        assert by_bob.like_count == 2

    def test_unlike(self, session_factory: sessionmaker[Session]) -> None:
        """Unlike decrements once; unliking again is a no-op."""
        alice = _user_id(session_factory)
        repo = PostRepositoryAdapter(session_factory)
        post = repo.create(alice, NewPost(content="hello", type="text"))
        repo.like(post.id, alice)

        assert repo.unlike(post.id, alice).like_count == 0
        state = repo.unlike(post.id, alice)
        assert (state.like_count, state.liked) == (0, False)
        assert repo.feed(alice)[0].liked_by_me is False

    def test_like_missing_post(self, session_factory: sessionmaker[Session]) -> None:
        alice = _user_id(session_factory)
        repo = PostRepositoryAdapter(session_factory)
        with pytest.raises(PostNotFoundError):
            repo.like(7, alice)
        with pytest.raises(PostNotFoundError):
            repo.unlike(7, alice)


# ══════════════════════════════════════════════════════════════════════
# Learning
# ══════════════════════════════════════════════════════════════════════


def _starter_lesson_id(factory: sessionmaker[Session]) -> int:
    with factory() as session:
        return session.scalar(select(LessonModel.id).order_by(LessonModel.id))


class TestLessonRepositoryAdapter:
    """Tests for LessonRepositoryAdapter."""

    def test_complete_awards_lesson_and_achievement_xp(
        self, seeded_factory: sessionmaker[Session]
    ) -> None:
        """100 lesson XP plus the 50 XP "First Steps" bonus."""
        user_id = _user_id(seeded_factory)
        lesson_id = _starter_lesson_id(seeded_factory)
        repo = LessonRepositoryAdapter(seeded_factory)

        completion = repo.complete(user_id, lesson_id, score=90, xp_per_level=1000)

        assert completion.xp_earned == 150
        assert (completion.xp, completion.level) == (150, 1)
        assert [a.title for a in completion.unlocked_achievements] == ["First Steps"]
        user = UserRepositoryAdapter(seeded_factory).get_by_id(user_id)
        assert user.xp == 150

        (overview,) = repo.list_with_progress(user_id)
        assert overview.progress.completed is True
        assert overview.progress.score == 90

        statuses = {s.achievement.title: s for s in repo.achievements(user_id)}
        assert statuses["First Steps"].unlocked
        assert not statuses["Rising Trader"].unlocked

    def test_level_recomputed_with_small_level_size(
        self, seeded_factory: sessionmaker[Session]
    ) -> None:
        """With 100 XP per level, 150 XP is level 2."""
        user_id = _user_id(seeded_factory)
        completion = LessonRepositoryAdapter(seeded_factory).complete(
            user_id, _starter_lesson_id(seeded_factory), score=None, xp_per_level=100
        )
        assert completion.level == 2

    def test_complete_twice(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        lesson_id = _starter_lesson_id(seeded_factory)
        repo = LessonRepositoryAdapter(seeded_factory)
        repo.complete(user_id, lesson_id, None, 1000)
        with pytest.raises(LessonAlreadyCompletedError):
            repo.complete(user_id, lesson_id, None, 1000)
        assert UserRepositoryAdapter(seeded_factory).get_by_id(user_id).xp == 150

    def test_complete_unknown_lesson(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        with pytest.raises(LessonNotFoundError):
            LessonRepositoryAdapter(seeded_factory).complete(user_id, 999, None, 1000)

    def test_lessons_ordered_and_untouched_progress_is_none(
        self, seeded_factory: sessionmaker[Session]
    ) -> None:
        repo = LessonRepositoryAdapter(seeded_factory)
        repo.create(
            NewLesson(
                title="Advanced Options",
                description="",
                content="# Options",
                difficulty="Advanced",
                xp_reward=200,
                order=0,
            )
        )
        lessons = repo.list_with_progress(_user_id(seeded_factory))
        assert [o.lesson.title for o in lessons] == [
            "Advanced Options",
            "Introduction to Stock Markets",
        ]
        assert all(o.progress is None for o in lessons)
        assert repo.exists_with_title("Advanced Options")


class TestQuizRepositoryAdapter:
    """Tests for QuizRepositoryAdapter."""

    def _question(self, factory: sessionmaker[Session]) -> QuizQuestionModel:
        with factory() as session:
            return session.scalar(select(QuizQuestionModel).order_by(QuizQuestionModel.id))

    def test_submit_updates_tally_and_xp(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        question = self._question(seeded_factory)
        repo = QuizRepositoryAdapter(seeded_factory)

        right = repo.submit(user_id, question.id, question.correct_answer, 1000, NOW)
        wrong = repo.submit(user_id, question.id, "nonsense", 1000, NOW + timedelta(minutes=1))

        assert (right.correct, right.xp_earned) == (True, 10)
        assert (wrong.correct, wrong.xp_earned) == (False, 0)
        assert wrong.correct_answer == question.correct_answer

        (progress,) = repo.progress(user_id)
        assert progress.section_id == question.section_id
        assert progress.score == 10
        assert progress.best_score == 10
        assert progress.total_questions_answered == 2
        assert progress.correct_answers == 1
        assert progress.attempts_count == 2
        assert progress.last_attempt_at == NOW + timedelta(minutes=1)
        assert UserRepositoryAdapter(seeded_factory).get_by_id(user_id).xp == 10

    def test_submit_into_existing_tally(self, seeded_factory: sessionmaker[Session]) -> None:
        """A later submit to the same section updates the stored row, not a new one."""
        user_id = _user_id(seeded_factory)
        first, second = QuizRepositoryAdapter(seeded_factory).questions(
            self._question(seeded_factory).section_id
        )[:2]

        QuizRepositoryAdapter(seeded_factory).submit(
            user_id, first.id, first.correct_answer, 1000, NOW
        )
        QuizRepositoryAdapter(seeded_factory).submit(
            user_id, second.id, second.correct_answer, 1000, NOW + timedelta(minutes=1)
        )

        (progress,) = QuizRepositoryAdapter(seeded_factory).progress(user_id)
        assert progress.total_questions_answered == 2
        assert progress.correct_answers == 2
        assert progress.score == first.xp_reward + second.xp_reward

    def test_wrong_answer_for_unknown_user(self, seeded_factory: sessionmaker[Session]) -> None:
        """The user row is locked for every submit, not only for correct answers."""
        question = self._question(seeded_factory)
        with pytest.raises(UserNotFoundError):
            QuizRepositoryAdapter(seeded_factory).submit(999, question.id, "nonsense", 1000, NOW)

    def test_unknown_question(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        with pytest.raises(QuestionNotFoundError):
            QuizRepositoryAdapter(seeded_factory).submit(user_id, 999, "x", 1000, NOW)

    def test_sections_and_questions(self, seeded_factory: sessionmaker[Session]) -> None:
        repo = QuizRepositoryAdapter(seeded_factory)
        sections = repo.sections()
        assert [s.title for s in sections] == ["Market Basics", "Order Types"]
        assert len(repo.questions(sections[1].id)) == 2
        assert len(repo.questions()) == 5


class TestFlashcardRepositoryAdapter:
    """Tests for FlashcardRepositoryAdapter."""

    def test_initialize_review_and_due(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        repo = FlashcardRepositoryAdapter(seeded_factory)
        card = repo.list_flashcards()[0]

        progress = repo.initialize(user_id, card.id, NOW)
        assert (progress.ease_factor, progress.interval) == (2.5, 0)
        assert progress.next_review_at == NOW

        (due,) = repo.due(user_id, NOW)
        assert due.flashcard.term == card.term

        reviewed = repo.review(user_id, card.id, True, NOW)
        assert reviewed.interval == 1
        assert reviewed.consecutive_correct == 1
        assert reviewed.next_review_at == NOW + timedelta(days=1)
        assert repo.due(user_id, NOW) == []
        assert len(repo.due(user_id, NOW + timedelta(days=1))) == 1

    def test_due_most_overdue_first(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        repo = FlashcardRepositoryAdapter(seeded_factory)
        first, second = repo.list_flashcards()[:2]
        repo.initialize(user_id, second.id, NOW - timedelta(days=3))
        repo.initialize(user_id, first.id, NOW - timedelta(days=1))
        assert [p.flashcard_id for p in repo.due(user_id, NOW)] == [second.id, first.id]

    def test_initialize_errors(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        repo = FlashcardRepositoryAdapter(seeded_factory)
        card = repo.list_flashcards()[0]
        with pytest.raises(FlashcardNotFoundError):
            repo.initialize(user_id, 999, NOW)
        repo.initialize(user_id, card.id, NOW)
        with pytest.raises(ProgressAlreadyInitializedError):
            repo.initialize(user_id, card.id, NOW)

    def test_review_without_progress(self, seeded_factory: sessionmaker[Session]) -> None:
        user_id = _user_id(seeded_factory)
        repo = FlashcardRepositoryAdapter(seeded_factory)
        with pytest.raises(FlashcardProgressNotFoundError):
            repo.review(user_id, repo.list_flashcards()[0].id, True, NOW)

    def test_filter_by_lesson(self, seeded_factory: sessionmaker[Session]) -> None:
        repo = FlashcardRepositoryAdapter(seeded_factory)
        lesson_id = _starter_lesson_id(seeded_factory)
        assert len(repo.list_flashcards(lesson_id)) == len(STARTER_FLASHCARDS)
        assert repo.list_flashcards(lesson_id + 100) == []
