import logging

from ..domain.model import Quiz
from ..schemas.page_schemas import (
    EndPage,
    NavLinks,
    PageViewModel,
    QuestionPage,
    TitlePage,
    TopicPage,
)

logger = logging.getLogger(__name__)

TITLE_URL = "/"
END_URL = "/end"


def question_url(position: int, reveal: bool) -> str:
    return f"/question/{position}?answer={'true' if reveal else 'false'}"


class NavigationService:
    """Maps a requested position in the quiz onto the page to show.

    Positions are 1-based. Anything outside ``1..len(questions)`` ends up on
    the end page; that is a normal outcome, not an error.
    """

    def __init__(self, quiz: Quiz) -> None:
        self.quiz = quiz

    def resolve_title(self) -> TitlePage:
        return TitlePage(
            title=self.quiz.meta.title,
            startLink=question_url(1, False),
        )

    def resolve_end(self) -> EndPage:
        # restart pre-sets the reveal flag
        return EndPage(
            title=self.quiz.meta.title,
            restartLink=question_url(1, True),
        )

    def real_question_number(self, position: int) -> int:
        """Number shown to the visitor: non-intro entries among the first ``position``."""
        return sum(1 for q in self.quiz.questions[:position] if not q.is_topic_intro)

    def resolve_question(self, position: int, reveal: bool = False) -> PageViewModel:
        questions = self.quiz.questions
        meta = self.quiz.meta

        # clamp first, then subtract: position 0 still gives 0
        prev_position = max(position, 1) - 1
        next_position = position + 1

        nav = NavLinks(
            prev=TITLE_URL if position == 1 else question_url(prev_position, reveal),
            # may point past the last entry; resolved on the next request
            next=question_url(next_position, reveal),
        )

        if not 1 <= position <= len(questions):
            logger.debug("Position %d outside 1..%d, showing end page", position, len(questions))
            return self.resolve_end()

        question = questions[position - 1]
        background = meta.background_image or ""

        if question.is_topic_intro:
            logger.debug("Position %d is topic intro %r", position, question.topic)
            return TopicPage(
                quizTitle=meta.title,
                topic=question.topic,
                image=question.image,
                navLinks=nav,
                background=background,
            )

        number = self.real_question_number(position)
        logger.debug("Position %d is question #%d (reveal=%s)", position, number, reveal)
        return QuestionPage(
            quizTitle=meta.title,
            navLinks=nav,
            background=background,
            number=number,
            kind=question.kind.value,
            topic=question.topic,
            text=question.text,
            image=question.image or "",
            options=list(question.options or ()),
            revealedAnswer=(question.answer or "") if reveal else "",
        )
