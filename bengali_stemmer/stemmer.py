import logging
from typing import Iterable, List, Optional, Sequence

from .buffer import WordBuffer
from .rules import BASIC_RULES, EXTENDED_RULES, SuffixRule

logger = logging.getLogger(__name__)

BENGALI_BLOCK = (0x0980, 0x09FF)
JOINERS = {"\u200c", "\u200d"}  # ZWNJ / ZWJ can sit inside a word


def _is_word_char(char: str) -> bool:
    """Bengali letters, signs and joiners; Bengali digits are not word characters"""
    if char in JOINERS:
        return True
    low, high = BENGALI_BLOCK
    return low <= ord(char) <= high and not char.isdigit()


class BengaliNounStemmer:
    """Rule-based Bengali noun stemmer: a single pass over an ordered rule table"""

    def __init__(self, extended: bool = True, rules: Optional[Sequence[SuffixRule]] = None):
        self.extended = extended
        if rules is None:
            rules = EXTENDED_RULES if extended else BASIC_RULES
        self.rules = tuple(rules)

    def __call__(self, word: str) -> str:
        """Stem a single word"""
        if not isinstance(word, str):
            raise TypeError(f"Expected str, got {type(word).__name__}")
        if not word:
            return ""

        buffer = WordBuffer(word)
        for rule in self.rules:
            before = buffer.text
            if rule.apply(buffer):
                logger.debug("%s: %s -> %s", rule.name, before, buffer.text)

        return buffer.text

    def stem_text(self, text: str) -> str:
        """Stem every Bengali word in running text, leaving everything else as is"""
        if not text:
            return ""

        result = []
        i = 0

        while i < len(text):
            if not _is_word_char(text[i]):
                # Spaces, punctuation, digits, other scripts pass through
                start = i
                while i < len(text) and not _is_word_char(text[i]):
                    i += 1
                result.append(text[start:i])
                continue

            start = i
            while i < len(text) and _is_word_char(text[i]):
                i += 1
            result.append(self(text[start:i]))

        return "".join(result)

    def stem_words(self, words: Iterable[str]) -> List[str]:
        """Stem pre-tokenized words"""
        return [self(word) for word in words]


# Global instance
_stemmer = BengaliNounStemmer()


def stem(word: str) -> str:
    """
    Stem a Bengali noun.

    Args:
        word: Inflected noun, e.g. মানুষদেরকে

    Returns:
        The noun with case, plural, classifier and possessive suffixes removed.
        Text that matches no rule comes back unchanged.

    Examples:
        >>> stem('মানুষদেরকে')
        'মানুষ'
        >>> stem('বাবার')
        'বাবা'
        >>> stem('পাথর')
        'পাথর'
    """
    return _stemmer(word)


def stem_text(text: str) -> str:
    """Stem each Bengali word in text, preserving spacing and punctuation"""
    return _stemmer.stem_text(text)


def stem_words(words: Iterable[str]) -> List[str]:
    return _stemmer.stem_words(words)
