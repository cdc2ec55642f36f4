from .classifier import is_dependent_vowel_sign, is_kar, is_vowel, stem_length
from .rules import BASIC_RULES, EXTENDED_RULES, SuffixRule
from .stemmer import BengaliNounStemmer, stem, stem_text, stem_words

__all__ = [
    "BASIC_RULES",
    "EXTENDED_RULES",
    "BengaliNounStemmer",
    "SuffixRule",
    "is_dependent_vowel_sign",
    "is_kar",
    "is_vowel",
    "stem",
    "stem_length",
    "stem_text",
    "stem_words",
]
