"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import and_, asc, delete, desc, exists, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository
from forum.domain.value import AnswerId, QuestionId
from forum.persistence.mappers import answer_to_dict, row_to_answer
from forum.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, accepted first then oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(desc(answers_table.c.is_accepted), asc(answers_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer. Its votes go with it (ON DELETE CASCADE)."""
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_vote_counts(
        self, answer_id: AnswerId, upvote_delta: int, downvote_delta: int
    ) -> None:
        """Apply both vote counter deltas in one statement."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(
                upvote_count=answers_table.c.upvote_count + upvote_delta,
                downvote_count=answers_table.c.downvote_count + downvote_delta,
                updated_at=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_accepted(self, answer_id: AnswerId, value: bool) -> None:
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=value, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def clear_accepted_except(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> int:
        """Unaccept every other accepted answer to the question."""
        stmt = (
            update(answers_table)
            .where(
                and_(
                    answers_table.c.question_id == question_id,
                    answers_table.c.id != answer_id,
                    answers_table.c.is_accepted.is_(True),
                )
            )
            .values(is_accepted=False, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def exists_accepted(
        self, question_id: QuestionId, exclude_answer_id: Optional[AnswerId] = None
    ) -> bool:
        """Check whether any answer to the question is accepted."""
        condition = and_(
            answers_table.c.question_id == question_id,
            answers_table.c.is_accepted.is_(True),
        )
        if exclude_answer_id is not None:
            condition = and_(condition, answers_table.c.id != exclude_answer_id)

        stmt = select(exists().where(condition))
        result = await self.session.execute(stmt)
        return bool(result.scalar())
