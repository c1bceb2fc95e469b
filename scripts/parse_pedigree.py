#!/usr/bin/env python3
"""
Точка входа: распознать сертификат родословной и вывести запись JSON.

Использование:
    # Фото сертификата (OCR по settings.OCR_PROVIDER)
    python scripts/parse_pedigree.py path/to/certificate.jpg

    # Уже распознанный текст (без OCR)
    python scripts/parse_pedigree.py --text path/to/raw_text.txt

    # Google Vision вместо Tesseract
    python scripts/parse_pedigree.py photo.jpg --provider google_vision

Код выхода 1, если поля нужно заполнять вручную.
"""

import sys
import argparse
import json
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pedigree_ocr.config.settings import DEFAULT_PROFILE, LOG_LEVEL
from pedigree_ocr.extraction import ExtractionComponentFactory
from pedigree_ocr.parsing import CertificateProfile, PedigreeParser
from pedigree_ocr.pipeline import PedigreeExtractionPipeline


def print_progress(pct: int) -> None:
    print(f"\r  [OCR] {pct:3d}%", end="", file=sys.stderr, flush=True)
    if pct >= 100:
        print(file=sys.stderr)


def main() -> int:
    parser = argparse.ArgumentParser(description="Pedigree OCR: сертификат -> запись родословной")
    parser.add_argument("path", nargs="?", help="Путь к фото сертификата (JPEG/PNG)")
    parser.add_argument("--text", help="Файл с уже распознанным текстом (OCR пропускается)")
    parser.add_argument("--provider", help="OCR провайдер: tesseract | google_vision")
    parser.add_argument("--profile", default=DEFAULT_PROFILE, help="Профиль сертификата (YAML)")
    parser.add_argument("--form", action="store_true", help="Вывести значения для формы с дефолтами")
    args = parser.parse_args()

    if not args.path and not args.text:
        parser.error("нужен путь к изображению или --text")

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=LOG_LEVEL
    )

    pedigree_parser = PedigreeParser(profile=CertificateProfile.load(args.profile))

    if args.text:
        pipeline = PedigreeExtractionPipeline(parser=pedigree_parser)
        raw_text = Path(args.text).read_text(encoding="utf-8")
        outcome = pipeline.parse_text(raw_text)
    else:
        pipeline = PedigreeExtractionPipeline(
            ocr_provider=ExtractionComponentFactory.create_ocr_provider(args.provider),
            parser=pedigree_parser
        )
        outcome = pipeline.extract(Path(args.path), on_progress=print_progress)

    result = outcome.record.to_form_values() if args.form else outcome.record.to_dict()
    print(json.dumps(result, ensure_ascii=False, indent=2))

    if outcome.raw_text:
        print("\n--- Распознанный текст ---", file=sys.stderr)
        print(outcome.raw_text, file=sys.stderr)

    if outcome.error:
        print(f"\n[ERROR] {outcome.error}", file=sys.stderr)

    return 1 if outcome.needs_manual_entry else 0


if __name__ == "__main__":
    sys.exit(main())
