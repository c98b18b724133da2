"""
Conjugation Errors

Error taxonomy for the Greek verb conjugator:
- MalformedStemTag: unrecognised tense tag (absorbed by falling back to present)
- UnknownTVMCode: tense-voice-mood code outside the supported set (skipped in batch paths)
- PersistenceFailure: output file cannot be created or written (fatal)
"""

from pathlib import Path
from typing import Union


class ConjugationError(Exception):
    """Base class for all conjugator errors."""


class MalformedStemTag(ConjugationError):
    """A tense tag that is not one of pres, fut, aor, perf."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unrecognised stem tag: {tag!r}")


class UnknownTVMCode(ConjugationError, KeyError):
    """A tense-voice-mood code with no ending table."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Unknown tense/voice/mood code: {self.code!r}"


class PersistenceFailure(ConjugationError):
    """Writing conjugated forms to disk failed."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not write {self.path}: {cause}")
