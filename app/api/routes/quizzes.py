from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.api.deps import get_current_user
from app.db.models import User
from app.db.session import get_db
from app.schemas.quiz import QuizCreate, QuizCreateResponse, QuizPublic, QuizResponse, QuizSummary
from app.schemas.submission import AnswerSubmission, QuizResult
from app.services import quiz_service

router = APIRouter(prefix="/quizzes", tags=["Quizzes"])


@router.post("", response_model=QuizCreateResponse, status_code=status.HTTP_201_CREATED)
def create_quiz(
    payload: QuizCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    quiz, code = quiz_service.create_quiz(db, current_user, payload)
    return QuizCreateResponse(quiz=QuizResponse.model_validate(quiz), code=code)


@router.get("", response_model=List[QuizSummary])
def list_my_quizzes(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Quizzes created by the current user, newest first, with question counts.
    """
    return quiz_service.list_creator_quizzes(db, current_user)


@router.get("/{code}", response_model=QuizPublic)
def get_quiz(code: str, db: Session = Depends(get_db)):
    return quiz_service.get_quiz_for_taking(db, code)


@router.post("/{code}/submit", response_model=QuizResult)
def submit_quiz(code: str, submission: AnswerSubmission, db: Session = Depends(get_db)):
    return quiz_service.submit_answers(db, code, submission)
