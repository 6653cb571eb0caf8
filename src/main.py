"""Entry point — wires Config → SpeechToText and prints the transcription."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from src.config import Config
from src.constants import CLI_DESCRIPTION, DEFAULT_EXTENSION
from src.errors import SpeechToTextError
from src.speech_to_text import SpeechToText


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="speech-to-text", description=CLI_DESCRIPTION)
    parser.add_argument("file", nargs="?", help="audio file to transcribe")
    parser.add_argument("-e", "--extension", default=None, help="audio format (default: file suffix, else mp3)")
    parser.add_argument("--formats", action="store_true", help="list supported formats and exit")
    return parser.parse_args(argv)


def _extension_for(file: str, explicit: Optional[str]) -> str:
    match (explicit, Path(file).suffix):
        case (str() as ext, _) if ext:
            return ext
        case (_, suffix) if suffix:
            return suffix.lstrip(".")
        case _:
            return DEFAULT_EXTENSION


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    speech = SpeechToText.from_config(config)

    match (args.formats, args.file):
        case (True, _):
            print(speech.supported_formats_message())
            return 0
        case (_, None):
            logger.error("No audio file given")
            return 2
        case (_, file):
            pass

    try:
        text = speech.transcribe(file, _extension_for(file, args.extension))
    except SpeechToTextError as exc:
        logger.error("%s", exc)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
