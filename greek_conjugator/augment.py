#!/usr/bin/env python3
"""
Temporal Augment

Secondary (past) tenses of the indicative mark the past with an augment.
A verb beginning with a consonant takes the syllabic augment ἐ-; a verb
beginning with α or αι lengthens the vowel instead (temporal augment),
keeping its breathing and dropping any accent:

    ἀκου  -> ἠκου      ἁρπαζ -> ἡρπαζ
    αἰτε  -> ᾐτε       αἱρε  -> ᾑρε
    παυ   -> ἐπαυ

Only the imperfect codes (iai, ipi) are augmented.
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from .paradigms import TVM

logger = logging.getLogger(__name__)

SYLLABIC_AUGMENT = 'ἐ'

AUGMENTED_CODES = frozenset(code.value for code in TVM if code.augmented)


@dataclass(frozen=True)
class AugmentRule:
    """A leading vowel and the augment that replaces it."""
    prefix: str
    augment: str

    @property
    def consumed(self) -> int:
        """Number of leading characters removed from the stem."""
        return len(self.prefix)


# Diphthongs come first so that αἰ/αἱ are never read as a bare α.
AUGMENT_RULES: Tuple[AugmentRule, ...] = (
    # αι with smooth breathing -> ᾐ
    AugmentRule('αἰ', 'ᾐ'),
    AugmentRule('αἴ', 'ᾐ'),
    AugmentRule('αἶ', 'ᾐ'),
    # αι with rough breathing -> ᾑ
    AugmentRule('αἱ', 'ᾑ'),
    AugmentRule('αἵ', 'ᾑ'),
    AugmentRule('αἷ', 'ᾑ'),
    # α with smooth breathing -> ἠ
    AugmentRule('ἀ', 'ἠ'),
    AugmentRule('ἂ', 'ἠ'),
    AugmentRule('ἆ', 'ἠ'),
    # α with rough breathing -> ἡ
    AugmentRule('ἁ', 'ἡ'),
    AugmentRule('ἅ', 'ἡ'),
    AugmentRule('ἇ', 'ἡ'),
)


def resolve_augment(stem: str) -> Tuple[str, str]:
    """
    Find the augment for a stem.

    Args:
        stem: bare stem text, e.g. "ἀκου"

    Returns:
        (augment, remaining stem), e.g. ("ἠ", "κου").
        Stems with no listed leading vowel get ("ἐ", stem).
    """
    for rule in AUGMENT_RULES:
        if stem.startswith(rule.prefix):
            logger.debug(f"Temporal augment {rule.prefix!r} -> {rule.augment!r} for {stem!r}")
            return rule.augment, stem[rule.consumed:]
    return SYLLABIC_AUGMENT, stem


def augmented_base(stem: str) -> str:
    """The stem with its augment applied: ἀκου -> ἠκου."""
    augment, rest = resolve_augment(stem)
    return augment + rest


def requires_augment(code: Union[str, TVM]) -> bool:
    value = code.value if isinstance(code, TVM) else code
    return value in AUGMENTED_CODES
