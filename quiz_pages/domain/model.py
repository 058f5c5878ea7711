from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class QuestionKind(str, Enum):
    TOPIC_INTRO = "topicIntro"
    TEXT = "text"
    AUDIO = "audio"
    MULTIPLE_CHOICE = "multipleChoice"


@dataclass(frozen=True)
class QuizMeta:
    title: str
    background_image: Optional[str] = None


@dataclass(frozen=True)
class Question:
    topic: str
    kind: QuestionKind
    text: Optional[str] = None
    image: Optional[str] = None
    answer: Optional[str] = None
    # read from content but not shown on any page
    source: Optional[str] = None
    options: Optional[Tuple[str, ...]] = None

    @property
    def is_topic_intro(self) -> bool:
        return self.kind is QuestionKind.TOPIC_INTRO


@dataclass(frozen=True)
class Quiz:
    meta: QuizMeta
    questions: Tuple[Question, ...] = ()
