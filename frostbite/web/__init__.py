"""Optional FastAPI surface (``pip install 'frostbite[web]'``)."""

from __future__ import annotations

from frostbite.web.app import create_app

__all__ = ["create_app"]
