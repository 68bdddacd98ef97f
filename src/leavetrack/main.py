from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module
from .container import build_container
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from .store.seed import seed_demo_data

from .calendar_view.controller import register as register_calendar
from .leaves.controller import register as register_leaves
from .projects.controller import register as register_projects
from .settings.controller import register as register_settings
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (InvalidStateTransitionError, 409),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
)


def _status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting with settings=%s", settings_module)

    container = build_container(
        settings={
            "DEFAULT_COUNTRY": getattr(settings, "DEFAULT_COUNTRY", "US"),
            "DEFAULT_ANNUAL_LEAVE_QUOTA": getattr(settings, "DEFAULT_ANNUAL_LEAVE_QUOTA", 20),
        }
    )
    if bool(getattr(settings, "AUTO_SEED_DATA", False)):
        seed_demo_data(container)
    app.extensions["leavetrack"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = _status_for(exc)
        if status >= 403:
            logger.info("request rejected (%s): %s", status, exc)
        return jsonify({"error": str(exc)}), status

    register_users(app, container)
    register_leaves(app, container)
    register_projects(app, container)
    register_calendar(app, container)
    register_settings(app, container)

    return app
