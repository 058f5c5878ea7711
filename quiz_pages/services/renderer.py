from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..schemas.page_schemas import PageViewModel

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATE_NAMES = {
    "title": "title.html",
    "topic": "topic.html",
    "question": "question.html",
    "end": "end.html",
}


def asset_url(path: str | None) -> str:
    """Root-relative URL for a content asset path such as ``static/a.png``.

    Pages live under ``/question/``, so a relative path would resolve
    against that prefix in the browser.
    """
    if not path:
        return ""
    if path.startswith("/") or "://" in path or path.startswith("data:"):
        return path
    if path.startswith("./"):
        path = path[2:]
    return "/" + path


class PageRenderer:
    def __init__(self, templates_dir: Path | str | None = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["asset_url"] = asset_url

    def render(self, model: PageViewModel) -> str:
        template = self.env.get_template(TEMPLATE_NAMES[model.page])
        return template.render(page=model)
