from pydantic import Field, field_validator
from typing import List, Literal, Optional
from quizmaster.schemas.base import CamelModel

Difficulty = Literal["easy", "medium", "hard"]

OPTION_COUNT = 4


class ThemeCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    icon: str = Field(min_length=1, max_length=100)
    color: str = Field(min_length=1, max_length=30)
    is_active: bool = True


class ThemeUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    icon: Optional[str] = Field(default=None, min_length=1, max_length=100)
    color: Optional[str] = Field(default=None, min_length=1, max_length=30)
    is_active: Optional[bool] = None


class ThemeOut(CamelModel):
    id: int
    name: str
    description: str
    icon: str
    color: str
    is_active: bool


def _check_options(options: Optional[List[str]]) -> Optional[List[str]]:
    if options is None:
        return options
    if len(options) != OPTION_COUNT:
        raise ValueError(f"Une question doit avoir exactement {OPTION_COUNT} réponses")
    if any(not option.strip() for option in options):
        raise ValueError("Les réponses ne peuvent pas être vides")
    return options


class QuestionCreate(CamelModel):
    question: str = Field(min_length=1)
    options: List[str]
    correct_answer: int = Field(ge=0, le=OPTION_COUNT - 1)
    difficulty: Difficulty = "medium"
    explanation: Optional[str] = None

    @field_validator("options")
    @classmethod
    def validate_options(cls, value):
        return _check_options(value)


class QuestionUpdate(CamelModel):
    question: Optional[str] = Field(default=None, min_length=1)
    options: Optional[List[str]] = None
    correct_answer: Optional[int] = Field(default=None, ge=0, le=OPTION_COUNT - 1)
    difficulty: Optional[Difficulty] = None
    explanation: Optional[str] = None

    @field_validator("options")
    @classmethod
    def validate_options(cls, value):
        return _check_options(value)


class QuestionPublic(CamelModel):
    """A question as shown to players before they submit: no answer, no explanation."""
    id: int
    theme_id: int
    question: str
    options: List[str]
    difficulty: str


class QuestionOut(QuestionPublic):
    correct_answer: int
    explanation: Optional[str] = None
