import pytest

from pi.inquire.render_config import reset_global_render_config


@pytest.fixture(autouse=True)
def _plain_render_config(monkeypatch):
    """Every test starts from the plain (NO_COLOR) default render config."""
    monkeypatch.setenv("NO_COLOR", "1")
    reset_global_render_config()
    yield
    reset_global_render_config()
