#!/usr/bin/env python3
"""
Greek Stem Classification

A stem string is written as ``tag:body`` where the tag names the principal
part the body was taken from:

    pres  - present stem   (παυ, ἀκου)
    fut   - future stem    (παυσ)
    aor   - aorist stem    (παυσ, ἐλυ)
    perf  - perfect stem   (πεπαυκ)

An unrecognised or missing tag is not an error: the whole input string is
treated as a present stem.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict

logger = logging.getLogger(__name__)

TAG_SEPARATOR = ':'


class StemType(Enum):
    """The principal part a stem belongs to."""
    PRESENT = 'pres'
    FUTURE = 'fut'
    AORIST = 'aor'
    PERFECT = 'perf'


# Tag prefix -> stem type
STEM_TAGS: Dict[str, StemType] = {t.value: t for t in StemType}


@dataclass(frozen=True)
class Stem:
    """A classified stem: its type plus the bare text endings attach to."""
    stem_type: StemType
    text: str

    @property
    def tag(self) -> str:
        return self.stem_type.value

    def __str__(self) -> str:
        return self.text


def split_tag(value: str):
    """Split ``tag:body`` at the first separator. Returns (tag, body) or (None, value)."""
    tag, sep, body = value.partition(TAG_SEPARATOR)
    if not sep:
        return None, value
    return tag, body


def classify_stem(value: str) -> Stem:
    """
    Classify a tense-tagged stem string.

    Args:
        value: e.g. "pres:παυ", "aor:ἐλυ" or a bare "παυ"

    Returns:
        Stem carrying the body for known tags; a present Stem carrying
        the whole input string for unknown or missing tags.
    """
    tag, body = split_tag(value)
    stem_type = STEM_TAGS.get(tag) if tag is not None else None

    if stem_type is None:
        if tag is not None:
            logger.debug(f"Unrecognised tag {tag!r} in {value!r}, treating as present stem")
        return Stem(StemType.PRESENT, value)

    return Stem(stem_type, body)
