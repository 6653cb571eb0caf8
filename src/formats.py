"""FormatCatalog — accepted audio extensions and their MIME types."""
from src.constants import CONTENT_TYPE_PREFIX, SUPPORTED_EXTENSIONS
from src.errors import UnsupportedFormat
from src.text_utils import to_sentence


class FormatCatalog:

    def __init__(self, extensions: tuple[str, ...] = SUPPORTED_EXTENSIONS) -> None:
        self._extensions = tuple(e.lower() for e in extensions)

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def is_supported(self, extension: str) -> bool:
        return extension.lower() in self._extensions

    def content_type_for(self, extension: str) -> str:
        """Return ``audio/<ext>`` for a supported extension. Raises UnsupportedFormat otherwise."""
        match self.is_supported(extension):
            case True:
                return CONTENT_TYPE_PREFIX + extension.lower()
            case False:
                raise UnsupportedFormat(extension)

    def describe_supported_formats(self) -> str:
        return to_sentence(self._extensions)
