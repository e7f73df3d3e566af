"""
Tests for the advisor application layer (use cases).

The LLM port is mocked; prompts come from the bundled YAML file so
template formatting is exercised too.
"""

from unittest.mock import MagicMock

import pytest

from app.application.advisor.analyze_market import AnalyzeMarketUseCase
from app.application.advisor.analyze_stock import AnalyzeStockUseCase
from app.application.advisor.ask_advisor import AskAdvisorUseCase
from app.application.advisor.chat import ChatUseCase
from app.application.advisor.dtos import (
    AdvisorQuestion,
    ChatCommand,
    ChatTurn,
    GenerateLessonCommand,
)
from app.application.advisor.generate_lesson import GenerateLessonUseCase
from app.domain.advisor.entities import ChatRole
from app.domain.advisor.ports import LLMPort
from app.domain.learning.entities import Lesson
from app.domain.learning.ports import LessonRepository
from app.domain.market.errors import StockNotFoundError
from app.infrastructure.advisor.prompt_loader import PromptLoader


@pytest.fixture(scope="module")
def prompts() -> PromptLoader:
    return PromptLoader()


@pytest.fixture
def llm() -> MagicMock:
    return MagicMock(spec=LLMPort)


class TestAnalyzeMarketUseCase:
    """Tests for AnalyzeMarketUseCase."""

    def test_symbol_is_in_system_prompt(self, llm: MagicMock, prompts: PromptLoader) -> None:
        """The rendered system prompt names the symbol and keeps literal braces."""
        metric = {"value": "v", "explanation": "e"}
        llm.complete_json.return_value = {
            "summary": "ok",
            "metrics": {"sentiment": metric, "momentum": metric, "risk": metric},
        }
        AnalyzeMarketUseCase(llm, prompts).execute("TSLA")

        system, user = llm.complete_json.call_args.args[0]
        assert system.role is ChatRole.SYSTEM
        assert "TSLA" in system.content
        assert '"summary"' in system.content
        assert "TSLA" in user.content


class TestChatUseCase:
    """Tests for ChatUseCase."""

    def test_history_order_and_roles(self, llm: MagicMock, prompts: PromptLoader) -> None:
        """System prompt first, prior turns in order, new message last."""
        llm.complete_json.return_value = {"content": "Diversification spreads risk."}
        reply = ChatUseCase(llm, prompts).execute(
            ChatCommand(
                message="And diversification?",
                history=[
                    ChatTurn("user", "What is a stock?"),
                    ChatTurn("assistant", "A share of a company."),
                    ChatTurn("system", "ignored"),
                ],
            )
        )
        assert reply.content == "Diversification spreads risk."
        messages = llm.complete_json.call_args.args[0]
        assert [m.role for m in messages] == [
            ChatRole.SYSTEM,
            ChatRole.USER,
            ChatRole.ASSISTANT,
            ChatRole.USER,
        ]
        assert messages[-1].content == "And diversification?"


class TestAskAdvisorUseCase:
    """Tests for AskAdvisorUseCase."""

    def test_missing_context_uses_placeholder(self, llm: MagicMock, prompts: PromptLoader) -> None:
        llm.complete_json.return_value = {"advice": [], "risks": [], "nextSteps": []}
        AskAdvisorUseCase(llm, prompts).execute(AdvisorQuestion(question="Should I diversify?"))
        user = llm.complete_json.call_args.args[0][-1]
        assert "Should I diversify?" in user.content
        assert "No additional context provided" in user.content


class TestAnalyzeStockUseCase:
    """Tests for AnalyzeStockUseCase."""

    def test_unknown_symbol_raises_without_llm_call(
        self, llm: MagicMock, prompts: PromptLoader
    ) -> None:
        """Symbols outside the catalog are rejected up front."""
        with pytest.raises(StockNotFoundError):
            AnalyzeStockUseCase(llm, prompts).execute("XYZ")
        llm.complete_json.assert_not_called()

    def test_catalog_stock_analysed(self, llm: MagicMock, prompts: PromptLoader) -> None:
        llm.complete_json.return_value = {
            "sentiment": 65,
            "risk": 30,
            "recommendation": "Buy",
            "reason": "Growing services revenue",
        }
        outlook = AnalyzeStockUseCase(llm, prompts).execute("aapl")
        assert outlook.symbol == "AAPL"
        assert outlook.recommendation == "Buy"
        assert "Apple Inc." in llm.complete_json.call_args.args[0][-1].content


class TestGenerateLessonUseCase:
    """Tests for GenerateLessonUseCase."""

    command = GenerateLessonCommand(
        title="Options Basics", description="Calls and puts", difficulty="Advanced", order=9
    )

    def test_existing_title_skipped(self, llm: MagicMock, prompts: PromptLoader) -> None:
        """A lesson with the same title is never regenerated."""
        repo = MagicMock(spec=LessonRepository)
        repo.exists_with_title.return_value = True
        assert GenerateLessonUseCase(llm, prompts, repo).execute(self.command) is None
        llm.complete.assert_not_called()
        repo.create.assert_not_called()

    def test_generated_lesson_stored(self, llm: MagicMock, prompts: PromptLoader) -> None:
        """The model's markdown becomes the lesson content."""
        repo = MagicMock(spec=LessonRepository)
        repo.exists_with_title.return_value = False
        repo.create.side_effect = lambda new: Lesson(
            id=5,
            title=new.title,
            description=new.description,
            content=new.content,
            difficulty=new.difficulty,
            xp_reward=new.xp_reward,
            order=new.order,
        )
        llm.complete.return_value = "# Options Basics"

        lesson = GenerateLessonUseCase(llm, prompts, repo, model="lesson-model").execute(
            self.command
        )

        assert lesson.content == "# Options Basics"
        assert llm.complete.call_args.kwargs["model"] == "lesson-model"
        assert llm.complete.call_args.kwargs["max_tokens"] == 4000
        user = llm.complete.call_args.args[0][-1]
        assert "Options Basics" in user.content
        assert "Advanced" in user.content
