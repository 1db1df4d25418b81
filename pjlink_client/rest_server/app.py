#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
A REST FastAPI server that controls a PJLink projector.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import os
import json

from contextlib import asynccontextmanager

from .logger import logger
from ..internal_types import *
from .. import (
    PjLinkClient,
    PjLinkClientConfig,
    PjLinkError,
    ConfigurationError,
    TransportError,
    ProtocolError,
    CommandRejected,
  )

from .api import router as api_router, get_projector_client

def load_raw_config() -> JsonableDict:
    """Loads the JSON config file named by PJLINK_CONFIG, or ./pjlink_config.json if
       present. Returns an empty dict if there is no config file."""
    config_file = os.environ.get("PJLINK_CONFIG", None)
    if config_file is None:
        if os.path.exists("pjlink_config.json"):
            config_file = "pjlink_config.json"
    if config_file is None:
        return {}
    with open(config_file, "r") as f:
        raw_config: JsonableDict = json.load(f)
    return raw_config

@asynccontextmanager
async def fastapi_lifetime(app: FastAPI) -> AsyncIterator[None]:
    """
    A context manager that initializes and cleans up for FastAPI.
    """

    try:
        logger.info("Projector REST server starting up--initializing...")
        pjlink_config = PjLinkClientConfig.from_jsonable(load_raw_config())
        # no connection is held; each request opens its own
        app.state.pjlink_client = PjLinkClient(config=pjlink_config)
        logger.info(f"Serving API for projector at {app.state.pjlink_client}...")
        yield
    finally:
        logger.info("Projector REST server shutting down--cleaning up...")

proj_api = FastAPI(lifespan=fastapi_lifetime)
proj_api.include_router(api_router)

def _error_response(status_code: int, exc: PjLinkError, **extra: Jsonable) -> JSONResponse:
    content: JsonableDict = dict(error=type(exc).__name__, detail=str(exc))
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)

@proj_api.exception_handler(PjLinkError)
async def pjlink_error_handler(request: Request, exc: PjLinkError) -> JSONResponse:
    logger.debug(f"Request {request.url.path} failed: {exc}")
    if isinstance(exc, CommandRejected):
        return _error_response(409, exc, error_code=exc.error_code.value)
    if isinstance(exc, TransportError):
        return _error_response(504, exc)
    if isinstance(exc, ProtocolError):
        return _error_response(502, exc)
    if isinstance(exc, ConfigurationError):
        return _error_response(500, exc)
    return _error_response(400, exc)
