"""
Pedigree OCR: фото сертификата родословной -> черновик формы регистрации.

Домены:
- extraction (D1): изображение -> RawOCRResult
- parsing (D2): сырой текст -> PedigreeRecord
"""

from .pipeline import PedigreeExtractionPipeline
from .contracts import PedigreeRecord, ExtractionOutcome, Gender

__version__ = "0.1.0"

__all__ = [
    "PedigreeExtractionPipeline",
    "PedigreeRecord",
    "ExtractionOutcome",
    "Gender",
]
