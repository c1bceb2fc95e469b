"""Конфигурация проекта Pedigree OCR."""
