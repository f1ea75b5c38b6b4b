from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload
from uuid import UUID
import uuid

from app.db.models import Quiz, Question
from app.schemas.quiz import QuizCreate


def create_quiz(db: Session, creator_id: UUID, code: str, data: QuizCreate) -> Quiz:
    """
    Insert a quiz and all of its questions in one transaction.

    Questions get their 1-based position in the input as `order`. Raises
    whatever the session raises on commit (e.g. IntegrityError on a duplicate
    code) after rolling back, so nothing partial is left behind.
    """
    quiz = Quiz(
        id=uuid.uuid4(),
        code=code,
        title=data.title,
        description=data.description,
        creator_id=creator_id,
    )
    for idx, question in enumerate(data.questions, start=1):
        quiz.questions.append(Question(
            id=uuid.uuid4(),
            text=question.text,
            options=list(question.options),
            correct_answer=question.correct_answer,
            order=idx,
        ))
    db.add(quiz)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(quiz)
    return quiz


def is_code_collision(exc: IntegrityError) -> bool:
    """True when the insert failed on the unique quiz code and nothing else."""
    constraint = getattr(getattr(exc.orig, "diag", None), "constraint_name", None)
    if constraint:
        return constraint == "uq_quizzes_code"
    # SQLite only reports the column
    return "quizzes.code" in str(exc.orig)


def get_quiz_by_code(db: Session, code: str, with_creator: bool = False):
    """
    Get a quiz by exact code match, questions loaded in `order`.
    """
    stmt = select(Quiz).where(Quiz.code == code).options(selectinload(Quiz.questions))
    if with_creator:
        stmt = stmt.options(joinedload(Quiz.creator))
    return db.execute(stmt).unique().scalar_one_or_none()


def get_quizzes_by_creator(db: Session, creator_id: UUID):
    """
    Get (quiz, question_count) pairs for a creator, newest first.
    """
    question_count = (
        select(func.count(Question.id))
        .where(Question.quiz_id == Quiz.id)
        .correlate(Quiz)
        .scalar_subquery()
    )
    stmt = (
        select(Quiz, question_count)
        .where(Quiz.creator_id == creator_id)
        .order_by(Quiz.created_at.desc())
    )
    return db.execute(stmt).all()
