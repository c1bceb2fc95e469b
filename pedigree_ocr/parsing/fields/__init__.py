"""
Экстракторы полей записи родословной.

Порядок в DEFAULT_EXTRACTORS важен: номер реестра нужен до поиска sire,
sire - до поиска dam.
"""

from .base import ExtractionContext, Strategy, FieldExtractor
from .name_extractor import NameExtractor
from .breed_extractor import BreedExtractor
from .gender_extractor import GenderExtractor
from .color_extractor import ColorExtractor
from .registration_extractor import RegistrationExtractor
from .date_extractor import BirthDateExtractor
from .parent_extractor import SireExtractor, DamExtractor
from .owner_extractor import OwnerExtractor

DEFAULT_EXTRACTORS = (
    RegistrationExtractor,
    NameExtractor,
    BreedExtractor,
    GenderExtractor,
    ColorExtractor,
    BirthDateExtractor,
    SireExtractor,
    DamExtractor,
    OwnerExtractor,
)

__all__ = [
    "ExtractionContext",
    "Strategy",
    "FieldExtractor",
    "NameExtractor",
    "BreedExtractor",
    "GenderExtractor",
    "ColorExtractor",
    "RegistrationExtractor",
    "BirthDateExtractor",
    "SireExtractor",
    "DamExtractor",
    "OwnerExtractor",
    "DEFAULT_EXTRACTORS",
]
