from __future__ import annotations

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient


# Ensure `import llmplatform.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setenv("LLMP_ENVIRONMENT", "test")
    monkeypatch.setenv("LLMP_VERSION", "2.3.4")
    monkeypatch.setenv("LLMP_LOG_JSON", "false")

    from llmplatform.core.settings import get_settings

    get_settings.cache_clear()

    from llmplatform.main import create_app

    app = create_app()
    return TestClient(app)
