"""TDD: FormatCatalog tests written FIRST"""
import pytest

from src.errors import UnsupportedFormat
from src.formats import FormatCatalog


@pytest.mark.parametrize("extension", ["mp3", "MP3", "wav", "Wav", "opus", "OPUS", "ogg", "oGg"])
def test_content_type_is_lowercased_audio_mime(extension):
    assert FormatCatalog().content_type_for(extension) == "audio/" + extension.lower()


@pytest.mark.parametrize("extension", ["flac", "m4a", "", "mp4", "mp3 "])
def test_unsupported_extension_raises(extension):
    with pytest.raises(UnsupportedFormat) as exc_info:
        FormatCatalog().content_type_for(extension)

    assert exc_info.value.extension == extension


def test_unsupported_error_keeps_original_case():
    with pytest.raises(UnsupportedFormat, match="FLAC"):
        FormatCatalog().content_type_for("FLAC")


def test_is_supported_is_case_insensitive():
    catalog = FormatCatalog()
    assert catalog.is_supported("Ogg")
    assert not catalog.is_supported("flac")


def test_describe_supported_formats():
    assert FormatCatalog().describe_supported_formats() == "mp3, wav, opus, and ogg"


@pytest.mark.parametrize(
    "extensions, expected",
    [
        ((), ""),
        (("mp3",), "mp3"),
        (("mp3", "wav"), "mp3 and wav"),
        (("mp3", "wav", "ogg"), "mp3, wav, and ogg"),
    ],
)
def test_describe_custom_catalog(extensions, expected):
    assert FormatCatalog(extensions).describe_supported_formats() == expected


def test_custom_catalog_normalises_case():
    catalog = FormatCatalog(("FLAC",))
    assert catalog.extensions == ("flac",)
    assert catalog.content_type_for("flac") == "audio/flac"
