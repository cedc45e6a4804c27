"""Shared test fixtures for the Google Docs parser test suite."""

from pathlib import Path

import pytest

SAMPLE_HTML = (
    "<h1>Order Summary</h1>"
    "<p>Customer Name: John Doe</p>"
    "<h2>Product title</h2>"
    "<p>Widget X</p>"
    "<h2>Features</h2>"
    "<ul><li>Waterproof</li><li>Lightweight</li></ul>"
    "<h3>Dimensions</h3>"
    "<table><tr><th>Width</th><th>Height</th></tr>"
    "<tr><td>10cm</td><td>20cm</td></tr></table>"
)


@pytest.fixture(autouse=True)
def _clear_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a PORT set in the developer's shell out of config tests."""
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def sample_html() -> str:
    """HTML resembling mammoth output for an order document."""
    return SAMPLE_HTML


@pytest.fixture
def downloaded_docx(tmp_path: Path) -> Path:
    """A fake downloaded DOCX inside its own temporary directory."""
    download_dir = tmp_path / "gdoc-parser-test"
    download_dir.mkdir()
    docx_path = download_dir / "abc123.docx"
    docx_path.write_bytes(b"PK\x03\x04 fake docx")
    return docx_path


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"
