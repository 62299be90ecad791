"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.domain.error import InvalidArgumentError, NotAuthorizedError, NotFoundError
from qna.domain.model import Answer, Question
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, NotificationType, QuestionId, UserId

from .base import Service
from .notification_service import NotificationService
from .reputation import ReputationTable
from .user_service import UserService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        user_service: UserService,
        reputation: ReputationTable,
        notification_service: NotificationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            user_service: User domain service
            reputation: Reputation point table
            notification_service: Notification domain service
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.user_service = user_service
        self.reputation = reputation
        self.notification_service = notification_service

    async def post_answer(
        self, question_id: QuestionId, author_id: UserId, body: str
    ) -> Answer:
        """Answer a question and notify the asker.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span(
            "answer_service.post_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            question = await self._get_question(question_id)

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                body=body,
                created_at=datetime.now(),
            )
            saved = await self.answer_repository.save(answer)
            await self.question_repository.increment_answer_count(question_id)
            await self.notification_service.notify(
                question.author_id,
                author_id,
                NotificationType.NEW_ANSWER,
                question_id=question_id,
                answer_id=saved.id,
            )
            logfire.info("Answer saved", answer_id=str(saved.id))
            return saved

    async def get_by_id(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_for_question(self, question_id: QuestionId) -> list[Answer]:
        """List answers to a question, accepted answer first.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        await self._get_question(question_id)
        return await self.answer_repository.find_by_question(question_id)

    async def accept(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Accept an answer on behalf of the question author.

        A previously accepted answer on the same question is un-accepted and
        its reputation award reversed. The answer author is notified.

        Raises:
            NotFoundError: If the answer or its question doesn't exist
            NotAuthorizedError: If the user didn't ask the question
            InvalidArgumentError: If the answer is already accepted
        """
        with logfire.span(
            "answer_service.accept", answer_id=str(answer_id), user_id=str(user_id)
        ):
            answer = await self.get_by_id(answer_id)
            question = await self._get_question(answer.question_id)
            self._check_question_author(question, answer, user_id, "accept")

            if answer.is_accepted:
                raise InvalidArgumentError("Answer is already accepted")

            if question.accepted_answer_id is not None:
                previous = await self.answer_repository.find_by_id(
                    question.accepted_answer_id
                )
                if previous is not None:
                    await self._unaccept(question, previous)

            await self.answer_repository.set_accepted(answer.id, True)
            await self.question_repository.set_accepted_answer(question.id, answer.id)
            await self._apply_acceptance_awards(question, answer, sign=1)
            await self.notification_service.notify(
                answer.author_id,
                user_id,
                NotificationType.ANSWER_ACCEPTED,
                question_id=question.id,
                answer_id=answer.id,
            )

            logfire.info("Answer accepted", answer_id=str(answer.id))
            return await self.get_by_id(answer.id)

    async def unaccept(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Withdraw acceptance of an answer.

        Raises:
            NotFoundError: If the answer or its question doesn't exist
            NotAuthorizedError: If the user didn't ask the question
            InvalidArgumentError: If the answer isn't accepted
        """
        with logfire.span(
            "answer_service.unaccept", answer_id=str(answer_id), user_id=str(user_id)
        ):
            answer = await self.get_by_id(answer_id)
            question = await self._get_question(answer.question_id)
            self._check_question_author(question, answer, user_id, "unaccept")

            if not answer.is_accepted:
                raise InvalidArgumentError("Answer is not accepted")

            await self._unaccept(question, answer)
            logfire.info("Answer unaccepted", answer_id=str(answer.id))
            return await self.get_by_id(answer.id)

    async def _unaccept(self, question: Question, answer: Answer) -> None:
        await self.answer_repository.set_accepted(answer.id, False)
        await self.question_repository.set_accepted_answer(question.id, None)
        await self._apply_acceptance_awards(question, answer, sign=-1)

    async def _apply_acceptance_awards(
        self, question: Question, answer: Answer, sign: int
    ) -> None:
        # Accepting your own answer earns nothing
        if answer.author_id == question.author_id:
            return
        await self.user_service.apply_reputation_delta(
            answer.author_id, sign * self.reputation.answer_accepted
        )
        await self.user_service.apply_reputation_delta(
            question.author_id, sign * self.reputation.accept_answer
        )

    async def _get_question(self, question_id: QuestionId) -> Question:
        question = await self.question_repository.find_by_id(question_id)
        if not question:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    @staticmethod
    def _check_question_author(
        question: Question, answer: Answer, user_id: UserId, action: str
    ) -> None:
        if question.author_id != user_id:
            raise NotAuthorizedError(action, "answer", str(answer.id), str(user_id))
