"""Shared test fixtures."""

from pathlib import Path

import pytest
from pagewiki.config import Config, PagesConfig, ServerConfig, TemplatesConfig


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create an empty page directory."""
    pages = tmp_path / "pages"
    pages.mkdir(exist_ok=True)
    return pages


@pytest.fixture
def test_config(data_dir: Path) -> Config:
    """Create a test configuration using bundled templates and tmp_path pages."""
    return Config(
        server=ServerConfig(),
        pages=PagesConfig(data_dir=data_dir),
        templates=TemplatesConfig(),
    )
