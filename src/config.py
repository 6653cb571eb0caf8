from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    BASE_URL,
    DEFAULT_AUDIO_DIR,
    DEFAULT_LOG_LEVEL,
    FFMPEG_BIN,
    WHISPER_MODEL,
)


@dataclass(frozen=True)
class Config:
    openai_api_key: str
    openai_base_url: str
    transcription_model: str
    audio_output_dir: str
    ffmpeg_path: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("OPENAI_API_KEY")
        base_url = os.getenv("OPENAI_BASE_URL") or BASE_URL
        model = os.getenv("TRANSCRIPTION_MODEL") or WHISPER_MODEL
        audio_dir = os.getenv("AUDIO_OUTPUT_DIR") or DEFAULT_AUDIO_DIR
        ffmpeg_path = os.getenv("FFMPEG_PATH") or FFMPEG_BIN
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls._validate(
            openai_api_key=api_key,
            openai_base_url=base_url,
            transcription_model=model,
            audio_output_dir=audio_dir,
            ffmpeg_path=ffmpeg_path,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        openai_api_key: Optional[str],
        openai_base_url: str,
        transcription_model: str,
        audio_output_dir: str,
        ffmpeg_path: str,
        log_level: str,
    ) -> "Config":
        match openai_api_key:
            case None | "":
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case str() as k if not k.strip():
                raise ValueError("OPENAI_API_KEY must not be blank")
            case _:
                pass

        return Config(
            openai_api_key=openai_api_key,
            openai_base_url=openai_base_url,
            transcription_model=transcription_model,
            audio_output_dir=audio_output_dir,
            ffmpeg_path=ffmpeg_path,
            log_level=log_level,
        )
