"""WhisperTranscriptionClient — OpenAI Whisper speech-to-text backend."""
import logging
from pathlib import Path
from typing import Optional

import httpx
from openai import APIStatusError, OpenAI

from src.constants import (
    BASE_URL,
    MSG_CLIENT_READY,
    MSG_RESPONSE_STATUS,
    MSG_SUBMITTING,
    TRANSCRIPTIONS_PATH,
    WHISPER_MODEL,
)
from src.errors import RemoteApiError, Unauthorized
from src.transcription.client import TranscriptionClient, TranscriptionResult, require_credential

logger = logging.getLogger(__name__)


def parse_response(response: httpx.Response) -> TranscriptionResult:
    """200 → parsed JSON, 401 → Unauthorized, anything else → RemoteApiError with the raw body."""
    logger.debug(MSG_RESPONSE_STATUS, response.status_code)
    match response.status_code:
        case 200:
            payload = response.json()
            return TranscriptionResult(text=payload.get("text", ""), payload=payload)
        case 401:
            raise Unauthorized()
        case status:
            raise RemoteApiError(status, response.text)


class WhisperTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = BASE_URL,
        model: str = WHISPER_MODEL,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._api_key = require_credential(api_key)
        self._model = model
        # No retries: every failure goes straight back to the caller.
        self._client = OpenAI(
            api_key=self._api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )
        logger.debug(MSG_CLIENT_READY, f"{base_url.rstrip('/')}/{TRANSCRIPTIONS_PATH}", model)

    def submit(self, file_path: str, content_type: str) -> TranscriptionResult:
        audio_path = Path(file_path)
        logger.info(MSG_SUBMITTING, audio_path.name, content_type)
        with audio_path.open("rb") as audio_file:
            try:
                raw = self._client.audio.transcriptions.with_raw_response.create(
                    model=self._model,
                    file=(audio_path.name, audio_file, content_type),
                )
                response = raw.http_response
            except APIStatusError as exc:
                response = exc.response
        return parse_response(response)
