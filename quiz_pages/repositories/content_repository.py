import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..domain.errors import ContentMalformed, ContentUnavailable
from ..domain.model import Question, Quiz, QuizMeta
from ..schemas.content_schemas import QuizDocumentIn

logger = logging.getLogger(__name__)


class ContentRepository:
    """Reads the quiz content file once and turns it into an immutable Quiz.

    The whole document is rejected on the first structural problem; there is
    no per-question skipping.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> Quiz:
        raw = self._read()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ContentMalformed(self.path, f"invalid JSON: {e}") from e

        try:
            doc = QuizDocumentIn.model_validate(data)
        except ValidationError as e:
            raise ContentMalformed(self.path, f"unexpected document shape: {e}") from e

        quiz = Quiz(
            meta=QuizMeta(
                title=doc.meta.title,
                background_image=doc.meta.backgroundImage,
            ),
            questions=tuple(
                Question(
                    topic=q.topic,
                    kind=q.type,
                    text=q.question,
                    image=q.image,
                    answer=q.answer,
                    source=q.source,
                    options=tuple(q.options) if q.options is not None else None,
                )
                for q in doc.questions
            ),
        )
        logger.info(
            "Loaded quiz %r from %s (%d entries)",
            quiz.meta.title, self.path, len(quiz.questions),
        )
        return quiz

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ContentUnavailable(self.path, f"cannot open quiz file: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise ContentMalformed(self.path, "quiz file is not valid UTF-8") from e


def load_quiz(path: Path | str) -> Quiz:
    return ContentRepository(path).load()
