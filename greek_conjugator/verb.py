"""
Verb and its conjugation results

A Verb is built once per request from a stem string. Each of the ten
supported codes has a slot that stays empty until that code is
conjugated; a filled slot is never recomputed.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .conjugator import GreekConjugator
from .errors import UnknownTVMCode
from .paradigms import ENDINGS, default_codes
from .stem_types import Stem, classify_stem

logger = logging.getLogger(__name__)

DISPLAY_DELIMITER = ', '


class Verb:
    """
    A stem plus one result slot per tense/voice/mood code.

    Usage:
        vb = Verb('pres:παυ')
        vb.conjugate_requests(['pai', 'iai'])
        vb.format_line('pai')  # 'παυω, παυεις, παυει, παυομεν, παυετε, παυουσι'
    """

    def __init__(self, stem: str, conjugator: Optional[GreekConjugator] = None):
        self.stem: Stem = classify_stem(stem)
        self.conjugator = conjugator or GreekConjugator()
        self._slots: Dict[str, Optional[Tuple[str, ...]]] = {code: None for code in ENDINGS}

    def __repr__(self) -> str:
        filled = [code for code, forms in self._slots.items() if forms is not None]
        return f"Verb({self.stem.tag}:{self.stem.text}, conjugated={filled})"

    def default_codes(self) -> List[str]:
        return default_codes(self.stem)

    def conjugate(self, code: str) -> Tuple[str, ...]:
        """
        Fill the slot for one code and return its forms.

        Raises:
            UnknownTVMCode: if the code has no slot
        """
        if code not in self._slots:
            raise UnknownTVMCode(code)
        if self._slots[code] is None:
            self._slots[code] = tuple(self.conjugator.conjugate(self.stem, code))
        return self._slots[code]

    def conjugate_requests(self, codes: Iterable[str]) -> None:
        """Conjugate each requested code in order; unknown codes are skipped."""
        for code in codes:
            try:
                self.conjugate(code)
            except UnknownTVMCode:
                logger.debug(f"Skipping {code!r} for {self.stem.text!r}: no ending table")

    def get(self, code: str) -> Optional[Tuple[str, ...]]:
        """Forms for a code, or None if not conjugated (or not a known code)."""
        return self._slots.get(code)

    def __getitem__(self, code: str) -> Optional[Tuple[str, ...]]:
        return self.get(code)

    def format_line(self, code: str, delimiter: str = DISPLAY_DELIMITER) -> Optional[str]:
        forms = self.get(code)
        if forms is None:
            return None
        return delimiter.join(forms)

    def lines(self, codes: Iterable[str], delimiter: str = DISPLAY_DELIMITER) -> List[str]:
        """Display lines for the requested codes that have results, in request order."""
        lines = []
        for code in codes:
            line = self.format_line(code, delimiter)
            if line is not None:
                lines.append(line)
        return lines

    def rows(self, codes: Iterable[str]) -> List[List[str]]:
        """Tabular rows (six fields each) for the requested codes that have results."""
        return [list(self._slots[code]) for code in codes if self.get(code) is not None]
