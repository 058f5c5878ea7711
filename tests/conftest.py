import json

import pytest
from fastapi.testclient import TestClient

from quiz_pages.core.config import Settings
from quiz_pages.main import create_app

GEO_QUIZ = {
    "meta": {"title": "Geo Quiz"},
    "questions": [
        {"topic": "Capitals", "type": "TopicIntro"},
        {
            "topic": "Capitals",
            "question": "Capital of France?",
            "type": "Text",
            "answer": "Paris",
            "options": [],
        },
    ],
}


@pytest.fixture
def write_content(tmp_path):
    def _write(document, name="questions.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_client(tmp_path, write_content):
    def _make(document=GEO_QUIZ):
        settings = Settings(
            QUIZ_FILE=write_content(document),
            STATIC_DIR=tmp_path / "static",
        )
        return TestClient(create_app(settings))

    return _make


@pytest.fixture
def geo_document():
    return GEO_QUIZ
