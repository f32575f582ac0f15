"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pagewiki.config import Config, PagesConfig, ServerConfig, TemplatesConfig


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "pagewiki.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[pages]
data_dir = "wiki"

[templates]
dir = "my-templates"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.pages.data_dir == tmp_path / "wiki"
        assert config.templates.dir == tmp_path / "my-templates"
        assert config.config_path == config_file

    def test__missing_explicit_path__raises(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for an explicit path that doesn't exist."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "nope.toml")

    def test__empty_file__uses_defaults(self, tmp_path: Path) -> None:
        """Use defaults for missing sections, with pages next to the config."""
        config_file = tmp_path / "pagewiki.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server == ServerConfig()
        assert config.pages.data_dir == tmp_path
        assert config.templates == TemplatesConfig()

    def test__no_config_file__returns_defaults(self, tmp_path: Path) -> None:
        """Return all defaults when nothing is discovered."""
        with patch("pagewiki.config.Path.cwd", return_value=tmp_path):
            config = Config.load()

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.pages == PagesConfig(data_dir=Path("."))
        assert config.templates.dir is None
        assert config.config_path is None

    def test__discovers_config_in_parent(self, tmp_path: Path) -> None:
        """Find pagewiki.toml in a parent directory."""
        (tmp_path / "pagewiki.toml").write_text("[server]\nport = 9000\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        with patch("pagewiki.config.Path.cwd", return_value=nested):
            config = Config.load()

        assert config.server.port == 9000
        assert config.config_path == tmp_path / "pagewiki.toml"

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nport = true", "server.port must be an integer"),
            ("[server]\nport = 70000", "server.port must be between 0 and 65535"),
            ("[server]\nport = -1", "server.port must be between 0 and 65535"),
            ("pages = 1", "pages section must be a dictionary"),
            ("[pages]\ndata_dir = 5", "pages.data_dir must be a string"),
            ("templates = []", "templates section must be a dictionary"),
            ("[templates]\ndir = false", "templates.dir must be a string"),
            ("[server", "Invalid TOML"),
        ],
    )
    def test__invalid_values__raise_value_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        """Reject values of the wrong type."""
        config_file = tmp_path / "pagewiki.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    @pytest.fixture
    def config(self, tmp_path: Path) -> Config:
        return Config(
            server=ServerConfig(host="localhost", port=8000),
            pages=PagesConfig(data_dir=tmp_path / "pages"),
            templates=TemplatesConfig(),
        )

    def test__no_overrides__returns_equal_config(self, config: Config) -> None:
        """Leave everything untouched when all overrides are None."""
        assert config.with_overrides() == config

    def test__overrides__replace_values(self, config: Config, tmp_path: Path) -> None:
        """Apply each non-None override."""
        result = config.with_overrides(
            host="0.0.0.0",
            port=9999,
            data_dir=tmp_path / "other",
            templates_dir=tmp_path / "tpl",
        )

        assert result.server == ServerConfig(host="0.0.0.0", port=9999)
        assert result.pages.data_dir == tmp_path / "other"
        assert result.templates.dir == tmp_path / "tpl"

    def test__partial_override__keeps_other_values(self, config: Config) -> None:
        """Keep host when only port is overridden."""
        result = config.with_overrides(port=1234)

        assert result.server.host == "localhost"
        assert result.server.port == 1234

    def test__original__is_not_modified(self, config: Config) -> None:
        """Return a new Config instance."""
        config.with_overrides(host="0.0.0.0", port=1)

        assert config.server == ServerConfig(host="localhost", port=8000)
