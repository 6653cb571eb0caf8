"""TDD: Config tests written FIRST"""
import pytest
from src.config import Config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    for var in ("OPENAI_BASE_URL", "TRANSCRIPTION_MODEL", "AUDIO_OUTPUT_DIR", "FFMPEG_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: API key present."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test123")

    config = Config.from_env()

    assert config.openai_api_key == "sk-test123"


def test_config_missing_api_key_fails(monkeypatch):
    """Missing OPENAI_API_KEY must raise."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        Config.from_env()


def test_config_blank_api_key_fails(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "   ")

    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        Config.from_env()


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(
        openai_api_key="sk",
        openai_base_url="https://api.openai.com/v1",
        transcription_model="whisper-1",
        audio_output_dir="public/audio",
        ffmpeg_path="ffmpeg",
        log_level="INFO",
    )

    with pytest.raises(Exception):
        config.openai_api_key = "other"


def test_config_defaults(monkeypatch):
    """Optional fields have sensible defaults."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test123")

    config = Config.from_env()

    assert config.openai_base_url == "https://api.openai.com/v1"
    assert config.transcription_model == "whisper-1"
    assert config.audio_output_dir == "public/audio"
    assert config.ffmpeg_path == "ffmpeg"
    assert config.log_level == "INFO"


def test_config_overrides_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test123")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1")
    monkeypatch.setenv("TRANSCRIPTION_MODEL", "whisper-large")
    monkeypatch.setenv("AUDIO_OUTPUT_DIR", "/var/audio")
    monkeypatch.setenv("FFMPEG_PATH", "/usr/local/bin/ffmpeg")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.openai_base_url == "http://localhost:8080/v1"
    assert config.transcription_model == "whisper-large"
    assert config.audio_output_dir == "/var/audio"
    assert config.ffmpeg_path == "/usr/local/bin/ffmpeg"
    assert config.log_level == "DEBUG"


def test_config_blank_overrides_fall_back_to_defaults(monkeypatch):
    """Blank FFMPEG_PATH / AUDIO_OUTPUT_DIR → defaults."""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test123")
    monkeypatch.setenv("FFMPEG_PATH", "")
    monkeypatch.setenv("AUDIO_OUTPUT_DIR", "")

    config = Config.from_env()

    assert config.ffmpeg_path == "ffmpeg"
    assert config.audio_output_dir == "public/audio"
