"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, LedgerParams, LoggingParams, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_trip_config(self, trip_id: str) -> dict[str, Any]:
        """Load trip-specific configuration overrides."""
        trips_file = self.config_dir / "trips.yaml"

        if not trips_file.exists():
            return {}

        with open(trips_file) as f:
            trips_config = yaml.safe_load(f) or {}

        return trips_config.get("trips", {}).get(trip_id, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        trip_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Trip-specific overrides from trips.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if trip_id:
            config = self._deep_merge(config, self.load_trip_config(trip_id))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, merged: dict[str, Any]) -> DefaultConfig:
        """Turn a merged dictionary back into frozen config dataclasses."""
        return DefaultConfig(
            ledger=self._from_dict(LedgerParams, merged.get("ledger", {})),
            logging=self._from_dict(LoggingParams, merged.get("logging", {})),
        )

    def _from_dict(self, cls: type, values: dict[str, Any]) -> Any:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
