"""Bundled fallback repository dataset."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from repofolio.exceptions import FallbackLoadError
from repofolio.models.schemas import Repo

logger = logging.getLogger(__name__)

_repo_list = TypeAdapter(list[Repo])


def read_fallback(path: Path) -> list[Repo]:
    """
    Read the fallback dataset from a JSON file.

    Raises:
        FallbackLoadError: If the file is missing, unreadable or malformed
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise FallbackLoadError(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        raise FallbackLoadError(f"Invalid JSON in {path}: {e}") from e

    try:
        return _repo_list.validate_python(raw)
    except ValidationError as e:
        raise FallbackLoadError(f"Invalid repository data in {path}: {e}") from e


def load_fallback(path: Path) -> list[Repo]:
    """Load the fallback dataset, substituting an empty list on any failure."""
    try:
        repos = read_fallback(path)
    except FallbackLoadError as e:
        logger.warning(f"Could not load fallback repositories: {e}")
        return []
    logger.info(f"Loaded {len(repos)} fallback repositories from {path}")
    return repos
