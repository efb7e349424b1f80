"""JSON-file-backed implementation of FeatureFlagGateway.

The file is a flat ``{"FEATURE": true}`` object. Features that were never
switched read as disabled.
"""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.repository.feature_flags import FeatureFlagGateway


class JsonFeatureFlagStore(FeatureFlagGateway):

    def __init__(self, file_path: Path, known_features: tuple[str, ...] = ()) -> None:
        self._file_path = file_path
        self._known_features = known_features
        self._ensure_file()

    def is_active(self, feature_name: str) -> bool:
        return bool(self._load().get(feature_name, False))

    def set_active(self, feature_name: str, enabled: bool) -> None:
        flags = self._load()
        flags[feature_name] = enabled
        self._file_path.write_text(
            json.dumps(flags, indent=2, sort_keys=True) + "\n", encoding="utf-8"
        )

    def list_all(self) -> dict[str, bool]:
        flags = {name: False for name in self._known_features}
        flags.update(self._load())
        return flags

    def _load(self) -> dict[str, bool]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
