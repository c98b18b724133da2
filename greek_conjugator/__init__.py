# Greek Verb Conjugation Engine
# Thematic verb conjugation for the present, imperfect, future and aorist indicative

from .stem_types import StemType, Stem, classify_stem
from .paradigms import TVM, ENDINGS, DEFAULT_CODES, get_endings, default_codes, parse_codes
from .augment import AUGMENT_RULES, resolve_augment, requires_augment
from .conjugator import GreekConjugator, ConjugatedForm, conjugate
from .verb import Verb
from .errors import ConjugationError, MalformedStemTag, UnknownTVMCode, PersistenceFailure

__version__ = "0.1.0"
__all__ = [
    'StemType',
    'Stem',
    'classify_stem',
    'TVM',
    'ENDINGS',
    'DEFAULT_CODES',
    'get_endings',
    'default_codes',
    'parse_codes',
    'AUGMENT_RULES',
    'resolve_augment',
    'requires_augment',
    'GreekConjugator',
    'ConjugatedForm',
    'conjugate',
    'Verb',
    'ConjugationError',
    'MalformedStemTag',
    'UnknownTVMCode',
    'PersistenceFailure',
]
