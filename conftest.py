from pathlib import Path

import pytest

_APP_ROOT = Path(__file__).parent / "quizquest_app"


@pytest.hookimpl(tryfirst=True)
def pytest_collect_directory(path, parent):
    # The app's module packages define a ``setup_module(app)`` registry hook,
    # which pytest would otherwise call as an xunit fixture when collecting
    # doctests. Collect those directories as plain directories instead.
    if path == _APP_ROOT or _APP_ROOT in path.parents:
        return pytest.Dir.from_parent(parent, path=path)
    return None
