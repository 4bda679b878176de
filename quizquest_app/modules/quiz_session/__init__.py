"""Quiz session module: per-user session store and its HTTP API."""


def setup_module(app):
    from .config import QuizSessionConfig

    app.extensions.setdefault(QuizSessionConfig.STORE_EXTENSION_KEY, {})
    app.logger.info("Quiz Session Module Initialized.")
