"""aiohttp server for pagewiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from pagewiki.api.pages import create_pages_routes
from pagewiki.app_keys import renderer_key, store_key
from pagewiki.config import Config
from pagewiki.core.renderer import TemplateRenderer
from pagewiki.core.store import PageStore

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Templates are compiled here, once, before any request is served.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        TemplateLoadError: If the view or edit template cannot be loaded
    """
    app = web.Application()

    app[store_key] = PageStore(config.pages.data_dir)
    app[renderer_key] = TemplateRenderer(config.templates.dir)

    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server until interrupted.

    Args:
        config: Application configuration

    Raises:
        TemplateLoadError: If templates cannot be loaded
        OSError: If the server cannot listen on the configured address
    """
    app = create_app(config)
    logger.info(f"Serving pages from {config.pages.data_dir}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
