#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pattern_demos.config.loader import ConfigLoader
from pattern_demos.config.validation import ConfigValidator


def main(config_dir: Optional[str] = None) -> int:
    """Validate the merged configuration and report every problem found."""
    loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
    print(f"Validating configuration in {loader.config_dir} ...")

    try:
        merged = loader.merge_config()
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    errors = ConfigValidator.validate_config(merged)
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        return 1

    print("Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
