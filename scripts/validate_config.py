#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from proposal_app.config.loader import ConfigLoader
from proposal_app.errors import ConfigurationError


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating {loader.config_file}...")

    if not loader.config_file.exists():
        print("ℹ️  No config file found, built-in defaults apply")

    try:
        app_config = loader.load_app_config()
    except ConfigurationError as e:
        if e.errors:
            print(f"❌ Found {len(e.errors)} validation errors:")
            for error in e.errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
        else:
            print(f"❌ {e}")
        sys.exit(1)

    print("✅ Configuration is valid")
    print(f"  logging: {app_config.logging}")
    print(f"  output: {app_config.output}")
    sys.exit(0)


if __name__ == "__main__":
    main()
