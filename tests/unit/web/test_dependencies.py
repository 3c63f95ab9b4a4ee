"""Tests for tcgsearch.web.dependencies - Shared dependency providers."""

from pathlib import Path
from unittest.mock import MagicMock

from fastapi.templating import Jinja2Templates

from tcgsearch.web.dependencies import get_tcg_client, get_templates


def test_get_templates_returns_jinja2_instance():
    """Test that get_templates returns Jinja2Templates instance."""
    templates = get_templates()
    assert isinstance(templates, Jinja2Templates)


def test_get_templates_is_singleton():
    """Test that get_templates returns the same instance (singleton pattern)."""
    templates1 = get_templates()
    templates2 = get_templates()
    assert templates1 is templates2


def test_templates_directory_exists():
    from tcgsearch.web import dependencies

    expected_dir = Path(dependencies.__file__).parent / "templates"
    assert expected_dir.exists(), f"Templates directory not found: {expected_dir}"
    assert (expected_dir / "index.html").exists()


def test_get_tcg_client_reads_app_state():
    request = MagicMock()
    request.app.state.tcg_client = sentinel = object()
    assert get_tcg_client(request) is sentinel
