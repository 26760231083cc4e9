"""Tests for environment-sourced configuration."""

from upload_insight.config import DEFAULT_BASE_URL, DEFAULT_MODEL, ModelConfig


class TestModelConfig:
    def test_defaults_from_empty_environment(self):
        config = ModelConfig.from_env({})
        assert config.model == DEFAULT_MODEL
        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_key is None
        assert config.timeout is None
        assert config.max_retries == 0

    def test_reads_environment(self):
        config = ModelConfig.from_env(
            {
                "GEMINI_API_KEY": "gem-key",
                "OPENAI_API_KEY": "openai-key",
                "UPLOAD_INSIGHT_MODEL": "gemini-2.5-pro",
                "UPLOAD_INSIGHT_BASE_URL": "http://localhost:8080/v1",
                "UPLOAD_INSIGHT_TIMEOUT": "12.5",
            }
        )
        assert config.api_key == "gem-key"
        assert config.model == "gemini-2.5-pro"
        assert config.base_url == "http://localhost:8080/v1"
        assert config.timeout == 12.5

    def test_openai_key_fallback(self):
        assert ModelConfig.from_env({"OPENAI_API_KEY": "openai-key"}).api_key == "openai-key"

    def test_overrides_skip_none(self):
        config = ModelConfig(api_key="env-key").with_overrides(model="other", api_key=None)
        assert config.model == "other"
        assert config.api_key == "env-key"

    def test_reads_api_key_from_dotenv_file(self, tmp_path, monkeypatch):
        """A key kept in .env is picked up when the process environment lacks it."""
        for name in ("GEMINI_API_KEY", "OPENAI_API_KEY", "UPLOAD_INSIGHT_MODEL"):
            monkeypatch.delenv(name, raising=False)
        (tmp_path / ".env").write_text("GEMINI_API_KEY=from-dotenv\nUPLOAD_INSIGHT_MODEL=dotenv-model\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        config = ModelConfig.from_env()

        assert config.api_key == "from-dotenv"
        assert config.model == "dotenv-model"

    def test_process_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("GEMINI_API_KEY=from-dotenv\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GEMINI_API_KEY", "from-process")

        assert ModelConfig.from_env().api_key == "from-process"

    def test_missing_dotenv_file_is_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.chdir(tmp_path)

        assert ModelConfig.from_env().api_key is None
