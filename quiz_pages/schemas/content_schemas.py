from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..domain.model import QuestionKind

# PascalCase spellings accepted alongside the camelCase wire tags
_KIND_ALIASES = {
    "TopicIntro": QuestionKind.TOPIC_INTRO.value,
    "Text": QuestionKind.TEXT.value,
    "Audio": QuestionKind.AUDIO.value,
    "MultipleChoice": QuestionKind.MULTIPLE_CHOICE.value,
}


class MetaIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    backgroundImage: Optional[str] = None


class QuestionIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    topic: str
    question: Optional[str] = None
    image: Optional[str] = None
    type: QuestionKind
    answer: Optional[str] = None
    source: Optional[str] = None
    options: Optional[List[str]] = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_kind(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _KIND_ALIASES.get(v, v)
        return v


class QuizDocumentIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meta: MetaIn
    questions: List[QuestionIn]
