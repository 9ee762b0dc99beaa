"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from frostbite import __version__
from frostbite.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="frostbite", version=__version__)
    app.include_router(router)
    return app
