import pytest

from steam_roast.config import settings


@pytest.fixture(autouse=True)
def _isolated_log(tmp_path, monkeypatch):
    # Redirect settings paths to the temp directory
    monkeypatch.setattr(settings, "PROJECT_ROOT", tmp_path)
    return tmp_path
