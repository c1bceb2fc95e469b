"""Профили сертификатов (YAML)."""

from .certificate_profile import CertificateProfile

__all__ = ["CertificateProfile"]
