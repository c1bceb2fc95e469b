from .pedigree_parser import PedigreeParser

__all__ = ["PedigreeParser"]
