"""BudgetTracker application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Callable, Iterable, Optional

from flask import Flask

from .config import BaseConfig, DevConfig, TestConfig

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths registered on every app."""

    yield "budgettracker.blueprints.transactions"
    yield "budgettracker.blueprints.budgets"
    yield "budgettracker.blueprints.categories"
    yield "budgettracker.blueprints.accounts"


def create_app(
    config_name: str | None = None,
    *,
    probe: Optional[Callable[[], bool]] = None,
) -> Flask:
    """Create and configure the Flask application instance.

    ``probe`` overrides the database connectivity check used to decide when
    calls fall back to the local store.
    """

    # Imported lazily so that importing models alone does not pull in Flask wiring.
    from . import cli
    from .blueprints.common import EXTENSION_KEY, register_error_handlers
    from .context import create_app_context
    from .logging_config import setup_logging

    app = Flask(__name__, instance_relative_config=True)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["BUDGET_TRACKER_CONFIG"] = config_obj

    setup_logging(config_obj)
    app.extensions[EXTENSION_KEY] = create_app_context(config_obj, probe=probe)

    _register_blueprints(app)
    register_error_handlers(app)
    cli.init_app(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
