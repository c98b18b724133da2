#!/usr/bin/env python3
"""
Greek Verb Ending Paradigms

Ending tables for the thematic (-ω) indicative, keyed by a three-letter
tense/voice/mood code:

    p/i/f/a  - tense (present, imperfect, future, aorist)
    a/m/p    - voice (active, middle, passive)
    i        - mood (indicative)

Each table lists six endings in slot order: 1sg, 2sg, 3sg, 1pl, 2pl, 3pl.
The middle and passive of the present and imperfect share their endings,
so only the passive codes (ppi, ipi) are listed for those tenses.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from .errors import UnknownTVMCode
from .stem_types import Stem, StemType


class Person(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3


class Number(Enum):
    SINGULAR = 'sg'
    PLURAL = 'pl'


class Tense(Enum):
    PRESENT = 'p'
    IMPERFECT = 'i'
    FUTURE = 'f'
    AORIST = 'a'


class Voice(Enum):
    ACTIVE = 'a'
    MIDDLE = 'm'
    PASSIVE = 'p'


class Mood(Enum):
    INDICATIVE = 'i'


class TVM(Enum):
    """The tense/voice/mood combinations that have an ending table."""
    PAI = 'pai'
    PPI = 'ppi'
    IAI = 'iai'
    IPI = 'ipi'
    FAI = 'fai'
    FMI = 'fmi'
    FPI = 'fpi'
    AAI = 'aai'
    AMI = 'ami'
    API = 'api'

    @property
    def tense(self) -> Tense:
        return Tense(self.value[0])

    @property
    def voice(self) -> Voice:
        return Voice(self.value[1])

    @property
    def mood(self) -> Mood:
        return Mood(self.value[2])

    @property
    def augmented(self) -> bool:
        """Secondary tenses take a temporal augment."""
        return self.tense is Tense.IMPERFECT


@dataclass(frozen=True)
class ParadigmSlot:
    """One person/number cell of a paradigm."""
    person: Person
    number: Number

    @property
    def label(self) -> str:
        return f"{self.person.value}{self.number.value}"


PARADIGM_SLOTS: Tuple[ParadigmSlot, ...] = (
    ParadigmSlot(Person.FIRST, Number.SINGULAR),
    ParadigmSlot(Person.SECOND, Number.SINGULAR),
    ParadigmSlot(Person.THIRD, Number.SINGULAR),
    ParadigmSlot(Person.FIRST, Number.PLURAL),
    ParadigmSlot(Person.SECOND, Number.PLURAL),
    ParadigmSlot(Person.THIRD, Number.PLURAL),
)


# ============================================
# ENDINGS
# ============================================

# Primary active: λύω, λύεις, λύει ...
_PRIMARY_ACTIVE = ('ω', 'εις', 'ει', 'ομεν', 'ετε', 'ουσι')

# Primary middle/passive: λύομαι, λύῃ, λύεται ...
_PRIMARY_MIDDLE = ('ομαι', 'ῃ', 'εται', 'ομεθα', 'εσθε', 'ονται')

ENDINGS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'pai': _PRIMARY_ACTIVE,
    'ppi': _PRIMARY_MIDDLE,
    'iai': ('ον', 'ες', 'ε', 'ομεν', 'ετε', 'ον'),
    'ipi': ('ομην', 'ου', 'ετο', 'ομεθα', 'εσθε', 'οντο'),
    'fai': _PRIMARY_ACTIVE,
    'fmi': _PRIMARY_MIDDLE,
    'fpi': ('θησομαι', 'θησῃ', 'θησεται', 'θησομεθα', 'θησεσθε', 'θησονται'),
    'aai': ('α', 'ας', 'ε', 'αμεν', 'ατε', 'αν'),
    'ami': ('αμην', 'ω', 'ατο', 'αμεθα', 'ασθε', 'αντο'),
    'api': ('θην', 'θης', 'θη', 'θημεν', 'θητε', 'θησαν'),
})


# ============================================
# DEFAULT CODES PER STEM TYPE
# ============================================

# Perfect-family codes (pfai, pfpi, plai, plpi) have no ending table yet;
# requesting them yields no forms.
DEFAULT_CODES: Dict[StemType, Tuple[str, ...]] = {
    StemType.PRESENT: ('pai', 'ppi', 'iai', 'ipi'),
    StemType.FUTURE: ('fai', 'fmi', 'fpi'),
    StemType.AORIST: ('aai', 'ami', 'api'),
    StemType.PERFECT: ('pfai', 'pfpi', 'plai', 'plpi'),
}


def _code_value(code: Union[str, TVM]) -> str:
    return code.value if isinstance(code, TVM) else code


def is_known_code(code: Union[str, TVM]) -> bool:
    return _code_value(code) in ENDINGS


def get_endings(code: Union[str, TVM]) -> Tuple[str, ...]:
    """
    Get the six endings for a tense/voice/mood code.

    Raises:
        UnknownTVMCode: if the code has no ending table
    """
    value = _code_value(code)
    try:
        return ENDINGS[value]
    except KeyError:
        raise UnknownTVMCode(value) from None


def default_codes(stem: Stem) -> List[str]:
    """Codes conjugated when none are requested explicitly."""
    return list(DEFAULT_CODES[stem.stem_type])


def parse_codes(values: Iterable[str]) -> List[str]:
    """
    Flatten comma-separated code arguments, keeping request order.

    parse_codes(['pai,ppi', 'iai']) -> ['pai', 'ppi', 'iai']
    Unknown codes are kept; they are skipped when conjugating.
    """
    codes = []
    for value in values:
        for part in value.split(','):
            part = part.strip()
            if part:
                codes.append(part)
    return codes
