#!/usr/bin/env python3
"""
Greek Verb Conjugator

Main conjugation engine. Takes a classified stem and a tense/voice/mood
code and produces the six indicative forms (1sg, 2sg, 3sg, 1pl, 2pl, 3pl).

Handles:
- Present active and middle/passive
- Imperfect active and middle/passive (with augment)
- Future active, middle and passive
- Aorist active, middle and passive

Forms are built by plain concatenation of base and ending; no contraction
or consonant assimilation is applied at the boundary.
"""

import logging
from dataclasses import dataclass
from typing import List, Union

from .augment import augmented_base, requires_augment
from .paradigms import PARADIGM_SLOTS, Number, Person, get_endings
from .stem_types import Stem, classify_stem

logger = logging.getLogger(__name__)


@dataclass
class ConjugatedForm:
    """A single conjugated verb form."""
    form: str          # The conjugated word
    stem: str          # The bare stem it was built from
    code: str          # Tense/voice/mood code, e.g. "iai"
    person: Person
    number: Number
    label: str         # e.g. "1sg.iai"


class GreekConjugator:
    """
    Greek verb conjugator for thematic stems.

    Usage:
        conj = GreekConjugator()
        conj.conjugate('ἀκου', 'iai')       # ['ἠκουον', 'ἠκουες', ...]
        conj.conjugate('pres:παυ', 'pai')   # ['παυω', 'παυεις', ...]
    """

    def _as_stem(self, stem: Union[str, Stem]) -> Stem:
        return stem if isinstance(stem, Stem) else classify_stem(stem)

    def base_form(self, stem: Union[str, Stem], code: str) -> str:
        """The form endings attach to: augmented for secondary tenses, otherwise the stem."""
        text = self._as_stem(stem).text
        if requires_augment(code):
            return augmented_base(text)
        return text

    def conjugate(self, stem: Union[str, Stem], code: str) -> List[str]:
        """
        Conjugate a stem in all six persons/numbers.

        Args:
            stem: A Stem, or a stem string such as "pres:παυ"
            code: Tense/voice/mood code, e.g. "pai"

        Returns:
            Six forms in slot order

        Raises:
            UnknownTVMCode: if the code has no ending table
        """
        endings = get_endings(code)
        base = self.base_form(stem, code)
        return [base + ending for ending in endings]

    def conjugate_forms(self, stem: Union[str, Stem], code: str) -> List[ConjugatedForm]:
        """Like conjugate(), with person/number metadata attached to each form."""
        stem = self._as_stem(stem)
        forms = []
        for slot, form in zip(PARADIGM_SLOTS, self.conjugate(stem, code)):
            forms.append(ConjugatedForm(
                form=form,
                stem=stem.text,
                code=code,
                person=slot.person,
                number=slot.number,
                label=f"{slot.label}.{code}"
            ))
        return forms


_default_conjugator = GreekConjugator()


def conjugate(stem: Union[str, Stem], code: str) -> List[str]:
    """Conjugate with a shared GreekConjugator."""
    return _default_conjugator.conjugate(stem, code)
