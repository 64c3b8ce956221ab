from __future__ import annotations

import logging
from functools import lru_cache

import numpy as np
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import AuthorsResponse, ErrorResponse
from worklog.data import load_report
from worklog.errors import EmptyReport, FetchError, NoSelection, WorklogError
from worklog.metrics_author import compute_author
from worklog.metrics_overview import compute_overview
from worklog.models import WorklogReport


app = FastAPI(title="Worklog Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {FetchError: 502, EmptyReport: 404, NoSelection: 404}
ERROR_RESPONSES = {
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@lru_cache(maxsize=1)
def get_report() -> WorklogReport:
    # failed loads raise and are not cached
    return load_report()


def _json(data: object) -> JSONResponse:
    """Return JSON with numpy scalars converted to plain Python values."""
    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                np.integer: int,
                np.floating: float,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


def _error(exc: Exception) -> JSONResponse:
    if isinstance(exc, WorklogError):
        status = ERROR_STATUS.get(type(exc), 500)
        body = ErrorResponse(error=exc.user_message, type=type(exc).__name__)
    else:
        status = 500
        body = ErrorResponse(error=WorklogError.user_message, type="InternalError")
    return JSONResponse(status_code=status, content=body.model_dump())


@app.get("/meta/authors", response_model=AuthorsResponse, responses=ERROR_RESPONSES)
def meta_authors():
    try:
        names = list(dict.fromkeys(get_report().author_names))
        return _json(AuthorsResponse(authors=names, default_author=names[0] if names else None).model_dump())
    except WorklogError as exc:
        logger.warning("meta_authors: %s", exc)
        return _error(exc)
    except Exception as exc:
        logger.exception("meta_authors failed")
        return _error(exc)


@app.get("/overview", responses=ERROR_RESPONSES)
def overview():
    try:
        return _json(compute_overview(get_report()))
    except WorklogError as exc:
        logger.warning("overview: %s", exc)
        return _error(exc)
    except Exception as exc:
        logger.exception("overview failed")
        return _error(exc)


@app.get("/authors/{name}", responses=ERROR_RESPONSES)
def author(name: str):
    try:
        return _json(compute_author(get_report(), name))
    except WorklogError as exc:
        logger.warning("author %r: %s", name, exc)
        return _error(exc)
    except Exception as exc:
        logger.exception("author failed")
        return _error(exc)
