from typing import List, Literal

from pydantic import BaseModel


class NavLinks(BaseModel):
    prev: str
    next: str


class TitlePage(BaseModel):
    page: Literal["title"] = "title"
    title: str
    startLink: str


class TopicPage(BaseModel):
    page: Literal["topic"] = "topic"
    quizTitle: str
    topic: str
    image: str | None = None
    navLinks: NavLinks
    background: str = ""


class QuestionPage(BaseModel):
    page: Literal["question"] = "question"
    quizTitle: str
    navLinks: NavLinks
    background: str = ""
    number: int
    kind: str
    topic: str
    text: str | None = None
    image: str = ""
    options: List[str] = []
    revealedAnswer: str = ""


class EndPage(BaseModel):
    page: Literal["end"] = "end"
    title: str
    restartLink: str


PageViewModel = TitlePage | TopicPage | QuestionPage | EndPage
