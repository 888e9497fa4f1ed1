from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from automation_readiness.models.inputs import ReadinessInputs, field_for_key
from automation_readiness.services.validation import coerce_inputs

logger = logging.getLogger("automation_readiness")


class InputStore:
    """
    Last-used inputs kept as JSON at <directory>/<key>.json.
    Read/write failures are logged and never raised: a broken store
    only means falling back to defaults.
    """

    def __init__(self, directory: Path, key: str):
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> Optional[Dict[str, Any]]:
        path = self.path
        if not path.exists():
            logger.info("input_store_miss path=%s", path)
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("input_store_load_failed path=%s err=%s", path, exc)
            return None
        if not isinstance(payload, dict):
            logger.warning("input_store_load_failed path=%s err=not an object", path)
            return None
        logger.info("input_store_hit path=%s", path)
        return payload

    def save(self, inputs: ReadinessInputs) -> None:
        path = self.path
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(inputs.model_dump(), sort_keys=True), encoding="utf-8")
        except OSError as exc:
            logger.warning("input_store_save_failed path=%s err=%s", path, exc)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("input_store_clear_failed path=%s err=%s", self.path, exc)


def resolve_inputs(
    stored: Optional[Mapping[str, Any]] = None,
    query: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ReadinessInputs:
    """Layer defaults < stored < query < overrides, then clamp."""
    merged: Dict[str, Any] = {}
    for layer in (stored, query, overrides):
        for key, value in (layer or {}).items():
            field = field_for_key(key)
            if field is not None:
                merged[field] = value
    return coerce_inputs(merged)
