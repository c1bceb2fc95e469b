"""
Домен Parsing: сырой текст OCR -> PedigreeRecord.

Вход: RawOCRResult.full_text (D1 -> D2)
Выход: PedigreeRecord (d2_pedigree_dto.py)
"""

from .parser import PedigreeParser
from .normalization import TextNormalizer
from .profiles import CertificateProfile
from .validation import LineageValidator
from .domain import ParsingError, ParsingConfigurationError, FieldExtractionError

__all__ = [
    "PedigreeParser",
    "TextNormalizer",
    "CertificateProfile",
    "LineageValidator",
    "ParsingError",
    "ParsingConfigurationError",
    "FieldExtractionError",
]
