"""Domain слой домена Parsing: интерфейсы и исключения."""

from .exceptions import ParsingError, ParsingConfigurationError, FieldExtractionError
from .interfaces import IFieldExtractor, IPedigreeParser

__all__ = [
    "ParsingError",
    "ParsingConfigurationError",
    "FieldExtractionError",
    "IFieldExtractor",
    "IPedigreeParser",
]
