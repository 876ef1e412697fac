"""
Key-value persistence of projection inputs.

Each Inputs field is stored as its own entry (camelCase field name -> JSON
text), the way a browser form keeps one local-storage key per field.
Missing or unreadable entries fall back to the field default on load.
"""

import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .database import SettingRow, get_engine
from .encrypted_database import EncryptionManager, get_encryption_manager
from .models import Inputs

logger = logging.getLogger(__name__)

INPUT_KEYS = {to_camel(name) for name in Inputs.model_fields}


class SettingsStore:
    """Reads and writes Inputs as per-field settings rows."""

    def __init__(self, engine: Optional[Engine] = None, encryption: Optional[EncryptionManager] = None):
        self.engine = engine or get_engine()
        self.enc = encryption or get_encryption_manager()

    def _read_raw(self) -> Dict[str, str]:
        with Session(self.engine) as s:
            rows = s.scalars(select(SettingRow)).all()
            return {r.key: self.enc.decrypt(r.value) for r in rows}

    def save(self, inputs: Inputs) -> Inputs:
        """Upsert one row per field."""
        values = inputs.model_dump(by_alias=True)
        with Session(self.engine) as s:
            existing = {r.key: r for r in s.scalars(select(SettingRow)).all()}
            for key, value in values.items():
                payload = self.enc.encrypt(json.dumps(value))
                row = existing.get(key)
                if row is None:
                    s.add(SettingRow(key=key, value=payload))
                else:
                    row.value = payload
            s.commit()
        logger.debug("Saved %d settings", len(values))
        return inputs

    def load(self) -> Inputs:
        """Restore Inputs, using defaults for any missing or invalid entry."""
        values: Dict[str, Any] = {}
        for key, raw in self._read_raw().items():
            if key not in INPUT_KEYS:
                continue
            try:
                values[key] = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Ignoring unreadable setting %s", key)

        try:
            return Inputs.model_validate(values)
        except ValidationError as e:
            bad = {err["loc"][0] for err in e.errors() if err["loc"]}
            logger.warning("Ignoring invalid settings: %s", ", ".join(sorted(map(str, bad))))
            return Inputs.model_validate({k: v for k, v in values.items() if k not in bad})

    def clear(self) -> int:
        """Delete every stored setting; returns the number removed."""
        with Session(self.engine) as s:
            rows = s.scalars(select(SettingRow)).all()
            for r in rows:
                s.delete(r)
            s.commit()
            return len(rows)
