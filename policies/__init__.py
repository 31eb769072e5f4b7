# Policies package
"""
Policy-driven configuration for MyCosmo.

Application rules are stored in JSON files for:
- Auditability: Changes are tracked and explainable
- Controllability: Limits and endpoints can be adjusted without code changes
- Maintainability: Every component reads the same values
"""

from pathlib import Path
import json

POLICIES_DIR = Path(__file__).parent


def load_app_rules() -> dict:
    """Load application rules from JSON configuration."""
    rules_path = POLICIES_DIR / "app_rules.json"
    with open(rules_path, "r", encoding="utf-8") as f:
        return json.load(f)


# Pre-load rules on import for performance
APP_RULES = load_app_rules()
