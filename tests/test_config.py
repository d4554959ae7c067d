"""
Tests for configuration loading.

Validates that:
1. Defaults apply when nothing is set
2. Environment variables override defaults
3. .env files seed the environment without overriding it
4. validate() reports bad values
"""

from rustgate.config import Config, get_config


class TestDefaults:
    """Test defaults with a clean environment."""

    def test_defaults(self):
        config = get_config()
        assert config.toolchain.rustc == "rustc"
        assert config.log.level == "WARNING"
        assert config.log.log_dir == ""
        assert config.expand.namespace == "rustversion"

    def test_singleton(self):
        """get_config() returns the same instance until reset."""
        assert get_config() is get_config()
        first = get_config()
        Config.reset()
        assert get_config() is not first


class TestEnvironment:
    """Test environment overrides."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RUSTC", "/opt/rust/bin/rustc")
        monkeypatch.setenv("RUSTGATE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RUSTGATE_LOG_DIR", "logs")
        monkeypatch.setenv("RUSTGATE_ATTR_NAMESPACE", "compat")

        config = get_config()
        assert config.toolchain.rustc == "/opt/rust/bin/rustc"
        assert config.log.level == "DEBUG"
        assert config.log.log_dir == "logs"
        assert config.expand.namespace == "compat"

    def test_blank_values_fall_back(self, monkeypatch):
        """Blank RUSTC or namespace means the default."""
        monkeypatch.setenv("RUSTC", "  ")
        monkeypatch.setenv("RUSTGATE_ATTR_NAMESPACE", "")
        config = get_config()
        assert config.toolchain.rustc == "rustc"
        assert config.expand.namespace == "rustversion"

    def test_reload_picks_up_changes(self, monkeypatch):
        config = get_config()
        monkeypatch.setenv("RUSTC", "rustc-nightly")
        assert config.toolchain.rustc == "rustc"
        assert config.reload().toolchain.rustc == "rustc-nightly"
        assert get_config().toolchain.rustc == "rustc-nightly"


class TestEnvFiles:
    """Test .env loading (the working directory is a fresh tmp_path)."""

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("RUSTC=/from/dotenv/rustc\n")
        assert get_config().toolchain.rustc == "/from/dotenv/rustc"

    def test_rustgate_env_file(self, tmp_path):
        (tmp_path / "rustgate.env").write_text("RUSTGATE_ATTR_NAMESPACE=compat\n")
        assert get_config().expand.namespace == "compat"

    def test_dotenv_beats_rustgate_env(self, tmp_path):
        (tmp_path / ".env").write_text("RUSTC=from-dotenv\n")
        (tmp_path / "rustgate.env").write_text("RUSTC=from-rustgate-env\n")
        assert get_config().toolchain.rustc == "from-dotenv"

    def test_process_env_beats_files(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("RUSTC=from-dotenv\n")
        monkeypatch.setenv("RUSTC", "from-process")
        assert get_config().toolchain.rustc == "from-process"

    def test_custom_env_file(self, tmp_path):
        (tmp_path / "ci.env").write_text("RUSTGATE_LOG_LEVEL=ERROR\n")
        assert get_config("ci.env").log.level == "ERROR"


class TestValidate:
    """Test configuration validation."""

    def test_valid(self):
        is_valid, errors = get_config().validate()
        assert is_valid
        assert errors == []

    def test_lowercase_level_is_valid(self, monkeypatch):
        monkeypatch.setenv("RUSTGATE_LOG_LEVEL", "debug")
        assert get_config().validate()[0]

    def test_invalid_values(self, monkeypatch):
        monkeypatch.setenv("RUSTGATE_LOG_LEVEL", "LOUD")
        monkeypatch.setenv("RUSTGATE_ATTR_NAMESPACE", "rust-version")
        is_valid, errors = get_config().validate()
        assert not is_valid
        assert len(errors) == 2
        assert "LOUD" in errors[0]
        assert "rust-version" in errors[1]
