# campus_nav/runtime/resources.py
import json
import logging
from pathlib import Path
from typing import Any

from campus_nav.errors import DatasetError

logger = logging.getLogger(__name__)

EMPTY_DATASET: dict[str, list] = {"nodes": [], "edges": []}


def load_dataset(file: str | Path, *, must_exist: bool = True) -> dict[str, Any]:
    """Read a {"nodes": [...], "edges": [...]} JSON document."""
    p = Path(file)
    if not p.exists():
        if must_exist:
            raise FileNotFoundError(str(p))
        logger.warning("dataset %s not found; starting with an empty graph", p)
        return {k: list(v) for k, v in EMPTY_DATASET.items()}
    try:
        with p.open(encoding="utf-8") as f:
            doc = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DatasetError(f"{p}: not a UTF-8 JSON document ({exc})") from exc
    if not isinstance(doc, dict):
        raise DatasetError(f"{p}: expected a JSON object, got {type(doc).__name__}")
    doc.setdefault("nodes", [])
    doc.setdefault("edges", [])
    logger.info("loaded dataset %s", p)
    return doc
