import os

import pytest

# Must be set before plaintext_editor.runtime.telemetry configures itself.
os.environ.setdefault("PLAINTEXT_EDITOR_DISABLE_CONSOLE", "1")

from plaintext_editor.runtime import settings  # noqa: E402

_KEEP = {"PLAINTEXT_EDITOR_DISABLE_CONSOLE"}


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith(settings.ENV_PREFIX) and key not in _KEEP:
            monkeypatch.delenv(key, raising=False)
    settings.reset_settings()
    yield
    settings.reset_settings()
