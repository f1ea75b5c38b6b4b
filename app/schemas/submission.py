from typing import Any, List
from uuid import UUID

from app.schemas.base import BaseConfig


class SubmittedAnswer(BaseConfig):
    # kept as sent: an id matching no question is unanswered, a non-matching value is wrong
    question_id: Any = None
    selected_answer: Any = None


class AnswerSubmission(BaseConfig):
    answers: List[SubmittedAnswer]


class QuestionResult(BaseConfig):
    question_id: UUID
    text: str
    user_answer: Any = None
    correct_answer: str
    is_correct: bool


class QuizResult(BaseConfig):
    score: int
    total_questions: int
    percentage: int
    results: List[QuestionResult]
    quiz_title: str
