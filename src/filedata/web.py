"""FastAPI application exposing the document store over HTTP."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from fastapi import Body, Depends, FastAPI, HTTPException, Request

from .errors import DeserializationError, DocumentNotFoundError, InvalidArgumentError
from .settings import StoreSettings, load_settings
from .storage import FileDataAccess

logger = logging.getLogger(__name__)


def _load_document_or_404(store: FileDataAccess[Any], identifier: str) -> Any:
    try:
        return store.get(identifier)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except DeserializationError as exc:
        logger.warning("Stored document %s is unreadable: %s", identifier, exc)
        raise HTTPException(status_code=422, detail=str(exc))


def create_app(
    base_directory: str | Path | None = None, config_path: str | Path | None = None
) -> FastAPI:
    settings = load_settings(config_path)
    store: FileDataAccess[Any] = FileDataAccess(base_directory=base_directory or settings.base_directory)
    app = FastAPI(title="filedata", version="0.1.0")
    logger.info("Serving documents from %s", store.base_directory)

    def get_settings():
        return settings

    def require_auth(
        request: Request,
        config: StoreSettings = Depends(get_settings),
    ):
        if not config.auth_token:
            return
        if request.headers.get("X-Auth-Token") == config.auth_token:
            return
        raise HTTPException(status_code=401, detail="Unauthorized")

    auth = Depends(require_auth)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/documents/{identifier}")
    def read_document(identifier: str, _auth=auth):
        return _load_document_or_404(store, identifier)

    @app.put("/documents/{identifier}")
    def write_document(identifier: str, payload: Any = Body(None), _auth=auth) -> Dict[str, str]:
        try:
            store.set(identifier, payload)
            file_name = store.path_for(identifier).name
        except InvalidArgumentError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return {"id": identifier, "file_name": file_name}

    return app
