"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError
from qna.domain.repository import AnswerRepository, UserRepository
from qna.domain.service import AnswerService, QuestionService
from qna.domain.value import QuestionId, QuestionSortOrder
from qna.domain.value.types import TagName
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _author(env):
    user_repo = await env.get(UserRepository)
    return await user_repo.save(make_user("asker"))


class TestAsk:
    """Tests for ask and view."""

    @pytest.mark.asyncio
    async def test_duplicate_tags_are_collapsed(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        author = await _author(unit_env)

        question = await question_service.ask(
            author.id,
            "Why is my event loop closed?",
            "Details here.",
            [TagName("python"), TagName("asyncio"), TagName("python")],
        )

        assert [t.root for t in question.tags] == ["python", "asyncio"]

    @pytest.mark.asyncio
    async def test_view_counts(self, unit_env):
        question_service = await unit_env.get(QuestionService)
        author = await _author(unit_env)
        question = await question_service.ask(
            author.id, "Why is my event loop closed?", "Details.", [TagName("python")]
        )

        await question_service.view(question.id)
        viewed = await question_service.view(question.id)

        assert viewed.view_count == 2

    @pytest.mark.asyncio
    async def test_view_missing_question(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await question_service.view(QuestionId(uuid4()))


class TestListQuestions:
    """Tests for list_questions filters and sorting."""

    @pytest.mark.asyncio
    async def test_filters_by_tag_and_search(self, unit_env):
        """Tag filter and case-insensitive search should combine."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        author = await _author(unit_env)
        await question_service.ask(
            author.id, "Asyncio gather returns early", "Body", [TagName("python")]
        )
        await question_service.ask(
            author.id, "Borrow checker complaints", "Body", [TagName("rust")]
        )
        await question_service.ask(
            author.id, "Dataclass default factory", "ASYNCIO mention", [TagName("python")]
        )

        # Act
        by_tag, tag_total = await question_service.list_questions(
            QuestionSortOrder.NEWEST, TagName("python"), None, limit=10, offset=0
        )
        by_search, search_total = await question_service.list_questions(
            QuestionSortOrder.NEWEST, TagName("python"), "asyncio", limit=10, offset=0
        )

        # Assert
        assert tag_total == 2
        assert len(by_tag) == 2
        assert search_total == 2
        assert {q.title for q in by_search} == {
            "Asyncio gather returns early",
            "Dataclass default factory",
        }

    @pytest.mark.asyncio
    async def test_unanswered_excludes_answered(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        author = await _author(unit_env)
        answered = await question_service.ask(
            author.id, "Answered question here", "Body", [TagName("python")]
        )
        open_question = await question_service.ask(
            author.id, "Still open question", "Body", [TagName("python")]
        )
        await answer_service.post_answer(answered.id, author.id, "Self answer")

        # Act
        questions, total = await question_service.list_questions(
            QuestionSortOrder.UNANSWERED, None, None, limit=10, offset=0
        )

        # Assert
        assert total == 1
        assert [q.id for q in questions] == [open_question.id]

    @pytest.mark.asyncio
    async def test_answers_listed_accepted_first(self, unit_env):
        """The accepted answer should lead the list regardless of score."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        author = await _author(unit_env)
        question = await question_service.ask(
            author.id, "Which answer wins here", "Body", [TagName("python")]
        )
        popular = await answer_service.post_answer(question.id, author.id, "Popular")
        chosen = await answer_service.post_answer(question.id, author.id, "Chosen")
        await answer_repo.apply_score_delta(popular.id, 3)
        await answer_service.accept(chosen.id, author.id)

        # Act
        answers = await answer_service.list_for_question(question.id)

        # Assert
        assert [a.id for a in answers] == [chosen.id, popular.id]
