import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import BadRequest, InternalError, NotFound, Unauthorized
from app.crud import crud_quiz
from app.db.models import Quiz, User
from app.schemas.quiz import QuizCreate, QuizPublic, QuizSummary
from app.schemas.submission import AnswerSubmission, QuizResult
from app.services.code_generator import generate_quiz_code, normalize_quiz_code
from app.services.scoring import score_quiz

logger = logging.getLogger(__name__)


def create_quiz(db: Session, creator: Optional[User], payload: QuizCreate) -> Tuple[Quiz, str]:
    """
    Validate, issue a code and persist a quiz with its questions.

    A duplicate code rejected by the database is retried with a fresh code,
    up to QUIZ_CODE_MAX_ATTEMPTS times in total.
    """
    if creator is None:
        raise Unauthorized("Unauthorized")
    if not payload.title or not payload.title.strip():
        raise BadRequest("Title and questions are required")
    if not payload.questions:
        raise BadRequest("Title and questions are required")

    for attempt in range(1, settings.QUIZ_CODE_MAX_ATTEMPTS + 1):
        code = generate_quiz_code()
        try:
            quiz = crud_quiz.create_quiz(db, creator.id, code, payload)
        except IntegrityError as exc:
            if not crud_quiz.is_code_collision(exc):
                logger.exception("Error creating quiz")
                raise InternalError("Failed to create quiz")
            logger.warning("Quiz code collision on %s (attempt %d/%d)", code, attempt, settings.QUIZ_CODE_MAX_ATTEMPTS)
            continue
        except SQLAlchemyError:
            logger.exception("Error creating quiz")
            raise InternalError("Failed to create quiz")
        logger.info("Created quiz %s with %d questions for user %s", code, len(quiz.questions), creator.id)
        return quiz, code

    logger.error("Giving up on quiz creation after %d code collisions", settings.QUIZ_CODE_MAX_ATTEMPTS)
    raise InternalError("Failed to create quiz")


def _find_quiz(db: Session, code: str, with_creator: bool, failure: str) -> Quiz:
    try:
        quiz = crud_quiz.get_quiz_by_code(db, normalize_quiz_code(code), with_creator=with_creator)
    except SQLAlchemyError:
        logger.exception("Error fetching quiz %s", code)
        raise InternalError(failure)
    if quiz is None:
        raise NotFound("Quiz not found")
    return quiz


def get_quiz_for_taking(db: Session, code: str) -> QuizPublic:
    """Quiz as shown to a participant: questions carry no correct answers."""
    quiz = _find_quiz(db, code, with_creator=True, failure="Failed to fetch quiz")
    return QuizPublic.model_validate(quiz)


def submit_answers(db: Session, code: str, submission: AnswerSubmission) -> QuizResult:
    quiz = _find_quiz(db, code, with_creator=False, failure="Failed to submit quiz")
    return score_quiz(quiz.title, quiz.questions, submission.answers)


def list_creator_quizzes(db: Session, creator: Optional[User]) -> List[QuizSummary]:
    if creator is None:
        raise Unauthorized("Unauthorized")
    try:
        rows = crud_quiz.get_quizzes_by_creator(db, creator.id)
    except SQLAlchemyError:
        logger.exception("Error fetching quizzes for user %s", creator.id)
        raise InternalError("Failed to fetch quizzes")
    return [
        QuizSummary(
            id=quiz.id,
            code=quiz.code,
            title=quiz.title,
            description=quiz.description,
            created_at=quiz.created_at,
            question_count=count,
        )
        for quiz, count in rows
    ]
