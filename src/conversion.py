"""Audio conversion — shells out to ffmpeg with an argument vector, never a shell string."""
import logging
import subprocess
import time
from pathlib import Path

from src.constants import (
    CONVERT_TO_EXTENSION,
    FFMPEG_BIN,
    FFMPEG_CODEC_FLAG,
    FFMPEG_INPUT_FLAG,
    FFMPEG_MP3_CODEC,
    FFMPEG_NOT_FOUND_RETURNCODE,
    FFMPEG_OVERWRITE_FLAG,
    MSG_CONVERTED,
    MSG_CONVERTING,
    MSG_FFMPEG_NOT_FOUND,
    STDERR_EXCERPT_CHARS,
)
from src.errors import ConversionFailed

logger = logging.getLogger(__name__)


def output_path_for(input_path: str | Path, output_dir: str | Path, extension: str = CONVERT_TO_EXTENSION) -> Path:
    """<output_dir>/<input stem>.<extension>"""
    return Path(output_dir) / f"{Path(input_path).stem}.{extension}"


def build_ffmpeg_args(ffmpeg_path: str, input_path: Path, output_path: Path) -> list[str]:
    return [
        ffmpeg_path,
        FFMPEG_OVERWRITE_FLAG,
        FFMPEG_INPUT_FLAG,
        str(input_path),
        FFMPEG_CODEC_FLAG,
        FFMPEG_MP3_CODEC,
        str(output_path),
    ]


def convert_to_mp3(
    input_path: str | Path,
    output_dir: str | Path,
    ffmpeg_path: str = FFMPEG_BIN,
) -> Path:
    """Transcode ``input_path`` to mp3 under ``output_dir`` and return the new path.

    Blocks until ffmpeg exits. Raises ConversionFailed when the binary is
    missing or exits non-zero.
    """
    source = Path(input_path)
    target = output_path_for(source, output_dir)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger.info(MSG_CONVERTING, source.name, target)
    start = time.monotonic()
    try:
        result = subprocess.run(
            build_ffmpeg_args(ffmpeg_path, source, target),
            stdin=subprocess.DEVNULL,
            capture_output=True,
        )
    except FileNotFoundError as exc:
        logger.error(MSG_FFMPEG_NOT_FOUND, ffmpeg_path)
        raise ConversionFailed(
            FFMPEG_NOT_FOUND_RETURNCODE, str(exc), message=MSG_FFMPEG_NOT_FOUND % ffmpeg_path
        ) from exc

    match result.returncode:
        case 0:
            logger.info(MSG_CONVERTED, time.monotonic() - start)
            return target
        case code:
            err = result.stderr.decode(errors="replace")[-STDERR_EXCERPT_CHARS:] if result.stderr else ""
            exc = ConversionFailed(code, err)
            logger.error("%s", exc)
            raise exc
