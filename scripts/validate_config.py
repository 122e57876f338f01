#!/usr/bin/env python3
"""Configuration validation script.

Pass --verbose to see every match decision logged while alias overrides are
checked.
"""

import sys
from collections import Counter
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tracker_app.config.aliases import BUILTIN_ALIAS_PAIRS
from tracker_app.config.loader import ConfigLoader
from tracker_app.data.models import MatchStrategy
from tracker_app.errors import ConfigurationError
from tracker_app.logging import configure_logging
from tracker_app.matching.engine import MatchEngine


def report_overridden_aliases(pairs):
    """Print ledger names registered more than once and the target that wins."""
    counts = Counter(variant for variant, _ in pairs)
    winners = dict(pairs)
    for variant, count in counts.items():
        if count > 1:
            print(f"  • {variant!r} registered {count} times, resolves to {winners[variant]!r}")


def check_override_resolution(engine, overrides):
    """Each override must resolve to its own target through the alias strategy."""
    ok = True
    for variant, canonical in dict(overrides).items():
        result = engine.match(variant, [canonical])
        if result.strategy != MatchStrategy.ALIAS or result.matched_name != canonical:
            print(f"  ❌ {variant!r} resolves to {result.matched_name!r}, expected {canonical!r}")
            ok = False
    return ok


def main():
    """Main validation function."""
    level = "DEBUG" if "--verbose" in sys.argv[1:] else "WARNING"
    configure_logging(level=level, include_timestamp=False, stream=sys.stderr)

    print("🔍 Validating stock tracker configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    print("\n📋 Validating settings...")
    try:
        config = loader.load_config()
        print(f"✅ Settings are valid (date format {config.ledger.date_format!r})")
    except ConfigurationError as e:
        print(f"❌ {e}")
        for error in e.errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        config = None
        all_valid = False

    print("\n📋 Validating alias overrides...")
    try:
        overrides = loader.load_alias_overrides()
        table = loader.build_alias_table()
        print(f"✅ {len(overrides)} override pairs, {len(table)} aliases in effect")

        print("\n🔁 Ledger names with more than one alias pair:")
        report_overridden_aliases([*BUILTIN_ALIAS_PAIRS, *overrides])

        engine = MatchEngine(table, config.match if config else None)
        if not check_override_resolution(engine, overrides):
            all_valid = False
    except ConfigurationError as e:
        print(f"❌ {e}")
        for error in e.errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
