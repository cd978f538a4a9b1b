#!/usr/bin/env python3
"""Validate per-trip ledger overrides in config/trips.yaml."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from trip_ledger.config.loader import ConfigLoader
from trip_ledger.config.validation import ConfigValidator, ValidationError


def validate_trip_config(loader: ConfigLoader, trip_id: str) -> List[ValidationError]:
    """Validate configuration for a specific trip."""
    config = loader.merge_config(trip_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating trip ledger configuration...")

    loader = ConfigLoader.create(project_root / "config")
    trips_file = loader.config_dir / "trips.yaml"

    trip_ids = ["UNKNOWN-TRIP"]  # Should use defaults
    if trips_file.exists():
        with open(trips_file) as f:
            trip_ids = list((yaml.safe_load(f) or {}).get("trips", {})) + trip_ids

    all_valid = True

    for trip_id in trip_ids:
        print(f"\n🧳 Validating {trip_id}...")

        errors = validate_trip_config(loader, trip_id)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {trip_id} configuration is valid")

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
