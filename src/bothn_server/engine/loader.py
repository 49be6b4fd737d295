"""
Static Data Loading

Reads the knowledge base, intents and abbreviation map from JSON files and
validates them against the engine models. Any failure is fatal at startup
and surfaces as DataLoadError.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .models import AbbreviationsFile, Intent, IntentsFile, KnowledgeBaseFile, QAPair

logger = logging.getLogger("bothn.loader")

ModelT = TypeVar("ModelT", bound=BaseModel)


class DataLoadError(RuntimeError):
    """Raised when a static data file is missing or malformed."""


def _load(path: str | Path, model: Type[ModelT]) -> ModelT:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read data file %s: %s", path, exc)
        raise DataLoadError(f"Failed to load {path.name}") from exc

    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        logger.error("Invalid data file %s: %d validation errors", path, exc.error_count())
        raise DataLoadError(f"Invalid content in {path.name}") from exc


def load_qa_pairs(path: str | Path) -> List[QAPair]:
    data = _load(path, KnowledgeBaseFile)
    logger.info("Loaded %d Q&A pairs from %s", len(data.qa_pairs), path)
    return data.qa_pairs


def load_intents(path: str | Path) -> List[Intent]:
    data = _load(path, IntentsFile)
    logger.info("Loaded %d intents from %s", len(data.intents), path)
    return data.intents


def load_abbreviations(path: str | Path) -> Dict[str, str]:
    data = _load(path, AbbreviationsFile)
    return data.root
