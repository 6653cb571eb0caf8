"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from src.errors import MissingCredential


@dataclass(frozen=True)
class TranscriptionResult:
    text: str
    payload: dict[str, Any] = field(default_factory=dict)


def require_credential(credential: Optional[str]) -> str:
    """Return the credential unchanged, or raise MissingCredential when it is None or blank."""
    match credential:
        case str() as c if c.strip():
            return c
        case _:
            raise MissingCredential()


class TranscriptionClient(ABC):
    @abstractmethod
    def submit(self, file_path: str, content_type: str) -> TranscriptionResult:
        """Upload one audio file and return the parsed response. Raises on failure."""
        ...
