"""All magic values live here — no inline literals anywhere else."""

# OpenAI transcription endpoint
BASE_URL = "https://api.openai.com/v1"
TRANSCRIPTIONS_PATH = "audio/transcriptions"
WHISPER_MODEL = "whisper-1"

# Supported audio formats, in display order
SUPPORTED_EXTENSIONS: tuple[str, ...] = ("mp3", "wav", "opus", "ogg")
CONTENT_TYPE_PREFIX = "audio/"
DEFAULT_EXTENSION = "mp3"

# to_sentence connectors
WORDS_CONNECTOR = ", "
TWO_WORDS_CONNECTOR = " and "
LAST_WORD_CONNECTOR = ", and "

# Audio conversion (ffmpeg)
FFMPEG_BIN = "ffmpeg"
FFMPEG_OVERWRITE_FLAG = "-y"
FFMPEG_INPUT_FLAG = "-i"
FFMPEG_CODEC_FLAG = "-c:a"
FFMPEG_MP3_CODEC = "libmp3lame"
CONVERT_FROM_EXTENSION = "opus"
CONVERT_TO_EXTENSION = "mp3"
DEFAULT_AUDIO_DIR = "public/audio"
STDERR_EXCERPT_CHARS = 200
# Return code reported when the converter binary cannot be found (shell convention)
FFMPEG_NOT_FOUND_RETURNCODE = 127

# Config defaults
DEFAULT_LOG_LEVEL = "INFO"

# Error messages
MSG_MISSING_CREDENTIAL = "An OpenAI API key must be provided"
MSG_UNSUPPORTED_FORMAT = "Unsupported audio format: %s"
MSG_UNAUTHORIZED = "Invalid API key or unauthorized request!"
MSG_API_ERROR = "API Error: %s"
MSG_CONVERSION_FAILED = "Audio conversion failed (exit %s): %s"
MSG_FFMPEG_NOT_FOUND = "Audio converter not found: %s"

# Log messages
MSG_CLIENT_READY = "Transcription client ready → %s (model=%s)"
MSG_TRANSCRIBING = "Transcribing %s (%s)"
MSG_SUBMITTING = "Submitting %s as %s"
MSG_RESPONSE_STATUS = "Transcription HTTP %s"
MSG_CONVERTING = "Converting %s → %s"
MSG_CONVERTED = "✓ Converted (%.1fs)"

# User-facing
MSG_SUPPORTED_FORMATS = (
    "Currently, the supported formats are: %s. "
    "We are working on increasing this list"
)
CLI_DESCRIPTION = "Transcribe an audio file with the OpenAI speech-to-text API."
