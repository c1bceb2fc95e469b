from .lineage_validator import LineageValidator

__all__ = ["LineageValidator"]
