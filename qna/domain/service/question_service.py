"""Question domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, QuestionSortOrder, UserId
from qna.domain.value.types import TagName

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def ask(
        self, author_id: UserId, title: str, body: str, tags: list[TagName]
    ) -> Question:
        """Create a new question.

        Duplicate tags are collapsed, keeping first-seen order.

        Returns:
            Saved question
        """
        with logfire.span("question_service.ask", author_id=str(author_id)):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                body=body,
                author_id=author_id,
                tags=list(dict.fromkeys(tags)),
                created_at=now,
                last_activity_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question saved", question_id=str(saved.id), title=saved.title)
            return saved

    async def get_by_id(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_by_id", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def view(self, question_id: QuestionId) -> Question:
        """Get a question and count the view.

        Raises:
            NotFoundError: If question not found
        """
        await self.get_by_id(question_id)
        await self.question_repository.increment_view_count(question_id)
        return await self.get_by_id(question_id)

    async def list_questions(
        self,
        sort: QuestionSortOrder,
        tag: TagName | None,
        search: str | None,
        limit: int,
        offset: int,
    ) -> tuple[list[Question], int]:
        """List questions with filters.

        Returns:
            Page of questions and the total matching count
        """
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
        ):
            questions = await self.question_repository.find_all(
                sort=sort, tag=tag, search=search, limit=limit, offset=offset
            )
            total = await self.question_repository.count(
                tag=tag,
                search=search,
                unanswered_only=sort == QuestionSortOrder.UNANSWERED,
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total
