import os

from dotenv import load_dotenv

from bigo.config import Settings, get_settings


def test_dotenv_values_reach_environment_and_settings(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("GROQ_MODEL=llama-test\nMAX_CODE_LENGTH=1234\n")
    monkeypatch.delenv("GROQ_MODEL", raising=False)
    monkeypatch.delenv("MAX_CODE_LENGTH", raising=False)

    load_dotenv(env_file)
    try:
        assert os.environ["GROQ_MODEL"] == "llama-test"
        configured = Settings(_env_file=None)
        assert configured.GROQ_MODEL == "llama-test"
        assert configured.MAX_CODE_LENGTH == 1234
    finally:
        os.environ.pop("GROQ_MODEL", None)
        os.environ.pop("MAX_CODE_LENGTH", None)


def test_derived_properties(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("GROQ_API_KEY", "  ")
    configured = Settings(_env_file=None)
    assert configured.cors_origins == ["http://a.test", "http://b.test"]
    assert configured.ai_enabled is False


def test_wildcard_origin_wins(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test,*")
    assert Settings(_env_file=None).cors_origins == ["*"]


def test_settings_are_cached():
    assert get_settings() is get_settings()
