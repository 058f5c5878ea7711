from quiz_pages.schemas.page_schemas import EndPage, NavLinks, QuestionPage, TitlePage, TopicPage
from quiz_pages.services.renderer import PageRenderer, asset_url

renderer = PageRenderer()
nav = NavLinks(prev="/", next="/question/2?answer=false")


def test_title_page():
    html = renderer.render(TitlePage(title="Geo Quiz", startLink="/question/1?answer=false"))
    assert "<title>Geo Quiz</title>" in html
    assert 'href="/question/1?answer=false"' in html


def test_topic_page_with_background():
    html = renderer.render(
        TopicPage(quizTitle="Geo Quiz", topic="Capitals", image="static/map.png", navLinks=nav, background="static/bg.jpg")
    )
    assert "Capitals" in html
    assert 'src="/static/map.png"' in html
    assert "url('/static/bg.jpg')" in html
    assert 'href="/"' in html


def test_question_page_reveals_answer():
    page = QuestionPage(
        quizTitle="Geo Quiz",
        navLinks=nav,
        number=4,
        kind="multipleChoice",
        topic="Capitals",
        text="Capital of Australia?",
        options=["Sydney", "Canberra"],
        revealedAnswer="Canberra",
    )
    html = renderer.render(page)
    assert "Question 4" in html
    assert "<li>Sydney</li>" in html
    assert '<p class="answer">Canberra</p>' in html
    assert "<img" not in html


def test_question_page_hides_empty_answer():
    page = QuestionPage(quizTitle="Q", navLinks=nav, number=1, kind="text", topic="T", text="?")
    assert 'class="answer"' not in renderer.render(page)


def test_audio_question_gets_a_player():
    page = QuestionPage(quizTitle="Q", navLinks=nav, number=1, kind="audio", topic="T", image="static/a.mp3")
    assert '<audio class="question-audio" controls src="/static/a.mp3">' in renderer.render(page)


def test_text_is_escaped():
    page = QuestionPage(quizTitle="Q", navLinks=nav, number=1, kind="text", topic="T", text="<b>bold</b>")
    html = renderer.render(page)
    assert "&lt;b&gt;bold&lt;/b&gt;" in html


def test_end_page():
    html = renderer.render(EndPage(title="Geo Quiz", restartLink="/question/1?answer=true"))
    assert 'href="/question/1?answer=true"' in html


def test_custom_templates_dir(tmp_path):
    (tmp_path / "end.html").write_text("bye {{ page.title }}", encoding="utf-8")
    custom = PageRenderer(tmp_path)
    assert custom.render(EndPage(title="Geo Quiz", restartLink="/")) == "bye Geo Quiz"


def test_asset_url():
    assert asset_url("static/a.png") == "/static/a.png"
    assert asset_url("./static/a.png") == "/static/a.png"
    assert asset_url("/static/a.png") == "/static/a.png"
    assert asset_url("https://example.org/a.png") == "https://example.org/a.png"
    assert asset_url(None) == ""
