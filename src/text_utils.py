"""to_sentence — join a list into readable prose ("a, b, and c")."""
from collections.abc import Sequence

from src.constants import LAST_WORD_CONNECTOR, TWO_WORDS_CONNECTOR, WORDS_CONNECTOR


def to_sentence(
    items: Sequence[object],
    words_connector: str = WORDS_CONNECTOR,
    two_words_connector: str = TWO_WORDS_CONNECTOR,
    last_word_connector: str = LAST_WORD_CONNECTOR,
) -> str:
    words = list(map(str, items))
    match words:
        case []:
            return ""
        case [only]:
            return only
        case [first, second]:
            return f"{first}{two_words_connector}{second}"
        case [*head, last]:
            return f"{words_connector.join(head)}{last_word_connector}{last}"
