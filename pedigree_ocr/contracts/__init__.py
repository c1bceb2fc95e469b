"""
Контракты DTO между доменами Pedigree OCR.

- D1 -> D2: RawOCRResult (d1_extraction_dto.py)
- D2 -> форма: PedigreeRecord, ExtractionOutcome (d2_pedigree_dto.py)
"""

# D1 -> D2 (Extraction -> Parsing)
from .d1_extraction_dto import SourceImage, PreprocessedImage, RawOCRResult, OCRMetadata

# D2 -> форма регистрации
from .d2_pedigree_dto import Gender, ExtractionCandidate, PedigreeRecord, ExtractionOutcome

__all__ = [
    # D1 -> D2
    "SourceImage",
    "PreprocessedImage",
    "RawOCRResult",
    "OCRMetadata",
    # D2 -> форма
    "Gender",
    "ExtractionCandidate",
    "PedigreeRecord",
    "ExtractionOutcome",
]
