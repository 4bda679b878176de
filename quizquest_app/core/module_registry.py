"""Utilities for declaratively registering application modules.

Each blueprint-backed module is described with metadata so that module
discovery and registration stay in one place. A module package may also
expose ``setup_module(app)`` to connect its signal listeners and error
handlers once the blueprint is registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = import_string(self.import_path)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint

    def run_setup(self, app: Flask) -> None:
        """Call the package's ``setup_module`` hook when it defines one."""

        package_path = self.import_path.rsplit(".routes", 1)[0]
        package = import_string(package_path)
        setup = getattr(package, "setup_module", None)
        if callable(setup):
            setup(app)


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        blueprint = module.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        module.run_setup(app)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or blueprint.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in QuizQuest modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("quizquest_app.modules.auth.routes", "auth_bp", version="1.0"),
    ModuleDefinition("quizquest_app.modules.access_control.routes", "access_control_bp", version="1.0"),
    ModuleDefinition("quizquest_app.modules.questions.routes", "questions_bp", version="1.0"),
    ModuleDefinition("quizquest_app.modules.assignments.routes", "assignments_bp", version="1.0"),
    ModuleDefinition("quizquest_app.modules.quiz_session.routes", "quiz_session_bp", version="1.0"),
    ModuleDefinition("quizquest_app.modules.gamification.routes", "gamification_bp", version="1.0"),
    ModuleDefinition("quizquest_app.modules.notification.routes", "notification_bp", version="1.0"),
)
