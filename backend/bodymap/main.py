"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bodymap import __version__
from bodymap.config import Settings, settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app(cfg: Settings | None = None) -> FastAPI:
    cfg = cfg or settings
    app = FastAPI(
        title="bodymap",
        description="Anatomical diagram backend: path parsing, view frames and hit-testing",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _load_geometry(app, cfg)

    from bodymap.api.router import api_router

    app.include_router(api_router)

    return app


def _load_geometry(app: FastAPI, cfg: Settings) -> None:
    """Parse the static region catalog once and attach it with an empty frame cache."""
    from bodymap.engine.frame import FrameCache
    from bodymap.models.regions import RegionCatalog

    app.state.catalog = RegionCatalog.load(cfg.catalog_path)
    app.state.frames = FrameCache()


app = create_app()
