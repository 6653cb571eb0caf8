"""SpeechToText — facade: validate input, convert opus, delegate the upload.

Example::

    converter = SpeechToText("<YOUR_API_KEY>")
    text = converter.transcribe("path_to_audio_file.mp3")
"""
import logging
from pathlib import Path
from typing import Optional

from src.config import Config
from src.constants import (
    CONVERT_FROM_EXTENSION,
    CONVERT_TO_EXTENSION,
    DEFAULT_AUDIO_DIR,
    DEFAULT_EXTENSION,
    FFMPEG_BIN,
    MSG_SUPPORTED_FORMATS,
    MSG_TRANSCRIBING,
)
from src.conversion import convert_to_mp3
from src.formats import FormatCatalog
from src.transcription.client import TranscriptionClient, require_credential
from src.transcription.whisper import WhisperTranscriptionClient

logger = logging.getLogger(__name__)


class SpeechToText:

    def __init__(
        self,
        api_key: Optional[str],
        transcriber: Optional[TranscriptionClient] = None,
        audio_dir: str | Path = DEFAULT_AUDIO_DIR,
        ffmpeg_path: str = FFMPEG_BIN,
        catalog: Optional[FormatCatalog] = None,
    ) -> None:
        key = require_credential(api_key)
        self._transcriber = transcriber or WhisperTranscriptionClient(key)
        self._audio_dir = Path(audio_dir)
        self._ffmpeg_path = ffmpeg_path
        self._catalog = catalog or FormatCatalog()

    @classmethod
    def from_config(cls, config: Config) -> "SpeechToText":
        transcriber = WhisperTranscriptionClient(
            config.openai_api_key,
            base_url=config.openai_base_url,
            model=config.transcription_model,
        )
        return cls(
            config.openai_api_key,
            transcriber=transcriber,
            audio_dir=config.audio_output_dir,
            ffmpeg_path=config.ffmpeg_path,
        )

    def transcribe(self, file_path: str | Path, extension: str = DEFAULT_EXTENSION) -> str:
        """Transcribe one audio file and return its text.

        Opus input is converted to mp3 with ffmpeg first. Raises
        UnsupportedFormat before touching the file or the network, and
        ConversionFailed / Unauthorized / RemoteApiError from later steps.
        """
        content_type = self._catalog.content_type_for(extension)
        audio_path = Path(file_path)
        logger.debug(MSG_TRANSCRIBING, audio_path, extension)
        match extension.lower():
            case ext if ext == CONVERT_FROM_EXTENSION:
                audio_path = convert_to_mp3(audio_path, self._audio_dir, self._ffmpeg_path)
                content_type = self._catalog.content_type_for(CONVERT_TO_EXTENSION)
            case _:
                pass
        result = self._transcriber.submit(str(audio_path), content_type)
        return result.text

    write_down = transcribe

    def describe_supported_formats(self) -> str:
        return self._catalog.describe_supported_formats()

    def supported_formats_message(self) -> str:
        return MSG_SUPPORTED_FORMATS % self.describe_supported_formats()
