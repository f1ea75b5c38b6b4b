from typing import List, Optional, Union
from uuid import UUID

from pydantic import Field, StrictInt, field_validator, model_validator

from app.schemas.base import BaseConfig, UTCDateTime


# --------------------
# CREATION
# --------------------

class QuestionCreate(BaseConfig):
    text: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    # option text, or a 0-based index into options; always stored as the text
    correct_answer: Union[StrictInt, str]

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question text must not be blank")
        return value

    @field_validator("options")
    @classmethod
    def options_distinct(cls, value: List[str]) -> List[str]:
        if any(not option.strip() for option in value):
            raise ValueError("options must not be blank")
        if len(set(value)) != len(value):
            raise ValueError("options must be distinct")
        return value

    @model_validator(mode="after")
    def resolve_correct_answer(self):
        answer = self.correct_answer
        if isinstance(answer, int):
            if not 0 <= answer < len(self.options):
                raise ValueError("correctAnswer index is out of range")
            self.correct_answer = self.options[answer]
        elif answer not in self.options:
            raise ValueError("correctAnswer must match one of the options")
        return self


class QuizCreate(BaseConfig):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    questions: List[QuestionCreate] = Field(min_length=1)


# --------------------
# CREATOR VIEWS
# --------------------

class QuestionResponse(BaseConfig):
    id: UUID
    text: str
    options: List[str]
    correct_answer: str
    order: int


class QuizResponse(BaseConfig):
    id: UUID
    code: str
    title: str
    description: Optional[str] = None
    creator_id: UUID
    created_at: UTCDateTime
    questions: List[QuestionResponse] = []


class QuizCreateResponse(BaseConfig):
    quiz: QuizResponse
    code: str
    message: str = "Quiz created successfully"


class QuizSummary(BaseConfig):
    id: UUID
    code: str
    title: str
    description: Optional[str] = None
    created_at: UTCDateTime
    question_count: int


# --------------------
# PARTICIPANT VIEW (no answer keys)
# --------------------

class CreatorInfo(BaseConfig):
    name: str
    email: str


class QuestionPublic(BaseConfig):
    id: UUID
    text: str
    options: List[str]
    order: int


class QuizPublic(BaseConfig):
    id: UUID
    code: str
    title: str
    description: Optional[str] = None
    creator_id: UUID
    created_at: UTCDateTime
    creator: Optional[CreatorInfo] = None
    questions: List[QuestionPublic]
