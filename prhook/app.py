"""the beautiful world start from here."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from prhook.config import LOG_LEVEL
from prhook.errors import ConfigError
from prhook.routers import gh, info

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="GitHub → Discord (pull requests)")


@app.exception_handler(ConfigError)
async def config_error_handler(request: Request, exc: ConfigError) -> PlainTextResponse:
    # the reason is logged by get_settings, never echoed back
    return PlainTextResponse("invalid configuration", status_code=500)


app.include_router(info.router)
app.include_router(gh.router)
