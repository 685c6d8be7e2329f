from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from definition_reader import __version__

from api.dependencies import get_allowed_origins
from api.routes.definitions import router as definitions_router


def create_app() -> FastAPI:
    app = FastAPI(title="Definition Reader API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_allowed_origins(),
        allow_methods=["POST", "GET"],
        allow_headers=["Content-Type"],
    )
    app.include_router(definitions_router)

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
