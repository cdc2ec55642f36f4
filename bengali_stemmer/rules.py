"""Ordered suffix-removal rules for Bengali nouns.

A rule is plain data: the tails it recognises, an optional guard that looks
at the rest of the word, and how many characters to cut. The two tables at
the bottom are evaluated top to bottom, once, and each rule sees the output
of the one before it.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .buffer import WordBuffer
from .classifier import GLIDE_FORMS, HASANTA, is_dependent_vowel_sign, is_vowel, stem_length

Guard = Callable[[WordBuffer, str], bool]


@dataclass(frozen=True)
class SuffixRule:
    """One stage of the stemming pipeline"""

    name: str
    suffixes: Tuple[str, ...]
    guard: Optional[Guard] = None
    strip: Optional[int] = None  # None: remove the matched suffix
    partial_strip: Optional[int] = None  # cut used when the guard rejects
    protects: Optional[str] = None  # tail marked as root after a partial strip

    def __post_init__(self):
        if not self.suffixes or not all(self.suffixes):
            raise ValueError(f"Rule {self.name!r} needs at least one non-empty suffix")
        shortest = min(len(suffix) for suffix in self.suffixes)
        for count in (self.strip, self.partial_strip):
            if count is not None and not 0 < count <= shortest:
                raise ValueError(
                    f"Rule {self.name!r} cannot strip {count} characters "
                    f"from a {shortest}-character suffix"
                )
        if self.partial_strip is not None and self.guard is None:
            raise ValueError(f"Rule {self.name!r} has a partial strip but no guard")
        if self.protects is not None and self.partial_strip is None:
            raise ValueError(f"Rule {self.name!r} protects a tail but has no partial strip")

    def apply(self, buffer: WordBuffer) -> bool:
        """Truncate buffer if the rule fires; True when something was removed"""
        suffix = buffer.ends_with_any(self.suffixes)
        if suffix is None:
            return False

        if self.guard is None or self.guard(buffer, suffix):
            buffer.truncate(self.strip or len(suffix))
            return True

        if self.partial_strip is not None:
            # What is left of the suffix belongs to the root
            buffer.truncate(self.partial_strip)
            if self.protects:
                buffer.protect(self.protects)
            return True

        return False


# Guards


def drops_emphatic_i(buffer: WordBuffer, suffix: str) -> bool:
    """ই is emphatic unless the word is a short root like বই or লুই"""
    # A bare ই or kar-only prefix (length 0) is kept as well, never emptied
    return stem_length(buffer.before(suffix)) > 1


def noun_eliminate_y(buffer: WordBuffer, suffix: str) -> bool:
    """Whether য় in a য়ের ending is a glide rather than part of the root.

    মায়ের drops the whole ending, উভয়ের keeps its য়.
    """
    term = buffer.before(suffix)
    return stem_length(term) == 1 or (bool(term) and is_vowel(term[-1]))


def follows_vowel_sign(buffer: WordBuffer, suffix: str) -> bool:
    """Genitive র attaches after a kar (বাবার), never after a bare consonant (পাথর)"""
    return is_dependent_vowel_sign(buffer.char_before(suffix))


def not_case_marker(buffer: WordBuffer, suffix: str) -> bool:
    # দে and কে are cut whole by the classifier stage
    return buffer.ends_with_any(("দে", "কে")) is None


def glide_unprotected(buffer: WordBuffer, suffix: str) -> bool:
    return not buffer.is_protected("glide")


def not_in_conjunct(buffer: WordBuffer, suffix: str) -> bool:
    """ট fused into a conjunct (ষ্টি in বৃষ্টি) is root, not the টি classifier"""
    return buffer.char_before(suffix) != HASANTA


# Tables

EMPHATIC_I = SuffixRule("emphatic-i", ("ই",), guard=drops_emphatic_i)
CASE_MARKERS = SuffixRule("case-marker", ("তে", "কে"))
PLURAL_RA = SuffixRule("plural-ra", ("রা",))
POSSESSIVE_GLIDE = SuffixRule(
    "possessive-glide",
    tuple(glide + "ের" for glide in GLIDE_FORMS),
    guard=noun_eliminate_y,
    partial_strip=2,
    protects="glide",
)
GENITIVE = SuffixRule("genitive", ("র",), guard=follows_vowel_sign)
LOCATIVE_E = SuffixRule("locative-e", ("ে",), guard=not_case_marker)
GLIDE = SuffixRule("glide", GLIDE_FORMS, guard=glide_unprotected)
PLURAL_ERA = SuffixRule("plural-era", ("েরা",))
CLASSIFIER_TI = SuffixRule("classifier-ti", ("টি",), guard=not_in_conjunct)
CLASSIFIERS = SuffixRule("classifier", ("দে", "কে", "কা", "টা"))
COLLECTIVES = SuffixRule("collective", ("জন", "লি"))
LONG_PLURALS = SuffixRule("long-plural", ("গুলো", "খানা"))

EXTENDED_RULES: Tuple[SuffixRule, ...] = (
    EMPHATIC_I,
    CASE_MARKERS,
    PLURAL_RA,
    POSSESSIVE_GLIDE,
    GENITIVE,
    LOCATIVE_E,
    GLIDE,
    PLURAL_ERA,
    CLASSIFIER_TI,
    CLASSIFIERS,
    COLLECTIVES,
    LONG_PLURALS,
)

BASIC_RULES: Tuple[SuffixRule, ...] = (
    CASE_MARKERS,
    PLURAL_RA,
    SuffixRule("genitive", ("র",)),
    LOCATIVE_E,
    SuffixRule("glide", GLIDE_FORMS),
    PLURAL_ERA,
    SuffixRule("classifier", ("দে", "কে", "কা", "টা", "টি")),
    COLLECTIVES,
    LONG_PLURALS,
)
