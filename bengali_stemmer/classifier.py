"""Bengali character classification.

Every structural guard in the rule table reduces to two interval checks over
the Bengali block: independent vowel letters (অ..ঔ) and dependent vowel
signs, the kars (া..ৌ).
"""

INDEPENDENT_VOWEL_RANGE = (0x0985, 0x0994)  # অ..ঔ
VOWEL_SIGN_RANGE = (0x09BE, 0x09CC)  # া..ৌ

HASANTA = "্"  # U+09CD, joins consonants into a conjunct
NUKTA = "়"  # U+09BC

# য় has a precomposed codepoint, but NFC decomposes it to য + nukta
GLIDE = "\u09df"  # য় precomposed
GLIDE_DECOMPOSED = "\u09af" + NUKTA  # য + nukta
GLIDE_FORMS = (GLIDE, GLIDE_DECOMPOSED)


def _in_range(char, interval) -> bool:
    if not isinstance(char, str) or len(char) != 1:
        return False
    low, high = interval
    return low <= ord(char) <= high


def is_vowel(char: str | None) -> bool:
    """True for an independent vowel letter (অ, আ, ই ... ঔ)"""
    return _in_range(char, INDEPENDENT_VOWEL_RANGE)


def is_dependent_vowel_sign(char: str | None) -> bool:
    """True for a dependent vowel sign (kar) such as া, ি or ে"""
    return _in_range(char, VOWEL_SIGN_RANGE)


is_kar = is_dependent_vowel_sign


def stem_length(text: str) -> int:
    """Count characters that are not vowel signs.

    Approximates the number of consonant and independent vowel units, so
    ``stem_length("লু") == 1`` while ``stem_length("সমাধান") == 4``.
    """
    return sum(1 for char in text if not is_dependent_vowel_sign(char))
