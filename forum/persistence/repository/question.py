"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Question
from forum.domain.repository import QuestionRepository
from forum.domain.value import QuestionFilter, QuestionId, TagName
from forum.persistence.mappers import question_to_dict, row_to_question
from forum.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository.

    Counter updates are single UPDATE statements computing from the current
    column value, so they never lose a concurrent increment.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_all(
        self,
        filter: QuestionFilter = QuestionFilter.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            filter=filter.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = select(questions_table)

            if tag:
                # Array containment, served by the GIN index
                stmt = stmt.where(questions_table.c.tags.contains([tag.root]))

            if search:
                pattern = f"%{search}%"
                stmt = stmt.where(
                    or_(
                        questions_table.c.title.ilike(pattern),
                        questions_table.c.body.ilike(pattern),
                    )
                )

            if filter == QuestionFilter.OLDEST:
                stmt = stmt.order_by(asc(questions_table.c.created_at))
            elif filter == QuestionFilter.MOST_VOTED:
                stmt = stmt.order_by(
                    desc(questions_table.c.upvote_count),
                    desc(questions_table.c.created_at),
                )
            elif filter == QuestionFilter.UNANSWERED:
                stmt = stmt.where(questions_table.c.answer_count == 0).order_by(
                    desc(questions_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def list_tags(self) -> List[TagName]:
        """List distinct tags used by any question."""
        tag = func.unnest(questions_table.c.tags).label("tag")
        stmt = select(tag).distinct().order_by(tag)
        result = await self.session.execute(stmt)
        return [TagName(row.tag) for row in result.fetchall()]

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question. Answers and votes go with it (ON DELETE CASCADE)."""
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_vote_counts(
        self, question_id: QuestionId, upvote_delta: int, downvote_delta: int
    ) -> None:
        """Apply both vote counter deltas in one statement."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                upvote_count=questions_table.c.upvote_count + upvote_delta,
                downvote_count=questions_table.c.downvote_count + downvote_delta,
                updated_at=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Apply a delta to answer_count."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=questions_table.c.answer_count + delta,
                updated_at=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_has_accepted_answer(
        self, question_id: QuestionId, value: bool
    ) -> None:
        """Set the accepted-answer flag."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(has_accepted_answer=value, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
