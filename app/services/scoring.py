"""
Scoring of a participant's submission against a quiz's answer key.

Everything here is pure: the same questions and answers always produce the same
`QuizResult`. Questions drive the output order; the order of the submitted
answers does not matter, and questions without a submitted answer count as
wrong.
"""
from operator import attrgetter
from typing import Iterable, Optional, Sequence
from uuid import UUID

from app.schemas.submission import QuestionResult, QuizResult, SubmittedAnswer


def calculate_percentage(score: int, total: int) -> int:
    """Whole-number percentage, rounding halves up (1/8 -> 13). Zero questions -> 0."""
    if total <= 0:
        return 0
    return (200 * score + total) // (2 * total)


def _answer_key(question_id) -> Optional[str]:
    if isinstance(question_id, UUID):
        return str(question_id)
    if isinstance(question_id, str):
        return question_id
    return None


def score_quiz(quiz_title: str, questions: Iterable, answers: Sequence[SubmittedAnswer]) -> QuizResult:
    # first answer wins when a question id is submitted more than once
    submitted = {}
    for answer in answers:
        key = _answer_key(answer.question_id)
        if key is not None:
            submitted.setdefault(key, answer)

    score = 0
    results = []
    ordered = sorted(questions, key=attrgetter("order"))
    for question in ordered:
        answer = submitted.get(str(question.id))
        is_correct = answer is not None and answer.selected_answer == question.correct_answer
        if is_correct:
            score += 1

        results.append(QuestionResult(
            question_id=question.id,
            text=question.text,
            user_answer=answer.selected_answer if answer is not None else None,
            correct_answer=question.correct_answer,
            is_correct=is_correct,
        ))

    total_questions = len(ordered)
    return QuizResult(
        score=score,
        total_questions=total_questions,
        percentage=calculate_percentage(score, total_questions),
        results=results,
        quiz_title=quiz_title,
    )
