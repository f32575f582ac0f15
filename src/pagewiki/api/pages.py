"""Page routes: view, edit and save.

Each route is registered for a path prefix and wrapped by ``make_handler``,
which validates the full request path before the action runs.
"""

import logging
from collections.abc import Awaitable, Callable
from urllib.parse import parse_qsl

from aiohttp import web

from pagewiki.app_keys import renderer_key, store_key
from pagewiki.core.page import Page
from pagewiki.core.titles import match_path
from pagewiki.errors import PageNotFoundError, PageSaveError, RenderError

logger = logging.getLogger(__name__)

PageAction = Callable[[web.Request, str], Awaitable[web.StreamResponse]]


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/view/{tail:.*}", make_handler(view_page)),
        web.get("/edit/{tail:.*}", make_handler(edit_page)),
        web.post("/save/{tail:.*}", make_handler(save_page)),
    ]


def make_handler(action: PageAction) -> Callable[[web.Request], Awaitable[web.StreamResponse]]:
    """Wrap a page action with request path validation.

    Args:
        action: Coroutine taking the request and the extracted title

    Returns:
        aiohttp handler responding 404 for paths that are not a valid
        ``/<action>/<title>`` path
    """

    async def handler(request: web.Request) -> web.StreamResponse:
        m = match_path(request.path)
        if m is None:
            raise web.HTTPNotFound()
        return await action(request, m.title)

    handler.__name__ = action.__name__
    return handler


async def view_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageNotFoundError:
        raise web.HTTPFound(f"/edit/{title}") from None
    return _render(request, "view", page)


async def edit_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageNotFoundError:
        page = Page(title=title)
    return _render(request, "edit", page)


async def save_page(request: web.Request, title: str) -> web.StreamResponse:
    page = Page(title=title, body=await _read_body_field(request))

    try:
        request.app[store_key].save(page)
    except PageSaveError as e:
        return web.Response(status=500, text=str(e))

    logger.info(f"Saved page {title}")
    raise web.HTTPFound(f"/view/{title}")


async def _read_body_field(request: web.Request) -> bytes:
    """Return the ``body`` form field as the exact bytes the client sent.

    Urlencoded forms are parsed from the raw request body with latin-1 on
    both sides of the percent-decoding, which maps every byte to itself
    whatever charset the client used. Other content types carry no form
    fields and yield an empty body.
    """
    if request.content_type == "multipart/form-data":
        form = await request.post()
        value = form.get("body", "")
        if not isinstance(value, str):
            # File uploads are not form values
            return b""
        return value.encode("utf-8")

    if request.content_type not in ("", "application/x-www-form-urlencoded"):
        return b""

    raw = await request.read()
    fields = parse_qsl(raw.decode("latin-1"), keep_blank_values=True, encoding="latin-1")
    for name, value in fields:
        if name == "body":
            return value.encode("latin-1")
    return b""


def _render(request: web.Request, view_name: str, page: Page) -> web.Response:
    try:
        html = request.app[renderer_key].render(view_name, page)
    except RenderError as e:
        logger.error(f"Failed to render {view_name} for {page.title}: {e}")
        return web.Response(status=500, text=str(e))
    return web.Response(text=html, content_type="text/html")
