from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import HTMLResponse

from ...services.navigation_service import NavigationService
from ...services.renderer import PageRenderer

router = APIRouter(tags=["pages"])

# Both live on app.state once the lifespan has loaded the quiz

def get_navigation(request: Request) -> NavigationService:
    return request.app.state.navigation


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


NavigationDep = Annotated[NavigationService, Depends(get_navigation)]
RendererDep = Annotated[PageRenderer, Depends(get_renderer)]


@router.get("/", response_class=HTMLResponse)
async def title_page(nav: NavigationDep, renderer: RendererDep):
    return renderer.render(nav.resolve_title())


@router.get("/end", response_class=HTMLResponse)
async def end_page(nav: NavigationDep, renderer: RendererDep):
    return renderer.render(nav.resolve_end())


@router.get("/question/{position}", response_class=HTMLResponse)
async def question_page(
    nav: NavigationDep,
    renderer: RendererDep,
    position: Annotated[int, Path(ge=0)],
    answer: Annotated[bool, Query()] = False,
):
    return renderer.render(nav.resolve_question(position, answer))
