"""Uvicorn server runner."""

import copy
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from noteboard.app import App
from noteboard.config import Config
from noteboard.web.server import create_fastapi_app

ACCESS_LOG_FORMAT = '%(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def build_log_config(config: Config) -> dict[str, Any]:
    """Uvicorn logging config for noteboard, leaving uvicorn's module default untouched."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = ACCESS_LOG_FORMAT
    log_config["formatters"]["default"]["fmt"] = DEFAULT_LOG_FORMAT
    log_config["loggers"]["uvicorn"]["level"] = "DEBUG" if config.debug else "INFO"
    return log_config


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)
    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=build_log_config(config),
        access_log=True,
    )
