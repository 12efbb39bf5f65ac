#!/usr/bin/env python3
"""Generate .env.example from HAMemberSettings fields.

This script introspects the Pydantic settings classes and generates
a documented .env.example file with all available environment variables.

Usage:
    uv run python scripts/generate_env_example.py
"""

from __future__ import annotations

import json
from pathlib import Path


def main() -> int:
    """Generate .env.example from settings definitions."""
    from hamember.config import LoggingSettings, ResolverSettings, StorageSettings

    lines = [
        "# hamember Configuration",
        "# Auto-generated from settings definitions - DO NOT EDIT MANUALLY",
        "# Copy to .env and modify as needed",
        "",
    ]

    settings_sections = [
        ("Logging", LoggingSettings),
        ("Storage", StorageSettings),
        ("Resolver", ResolverSettings),
    ]

    for section_name, cls in settings_sections:
        lines.append(f"# === {section_name} ===")

        model_config = getattr(cls, "model_config", {})
        prefix = model_config.get("env_prefix", "")

        for field_name, field_info in cls.model_fields.items():  # type: ignore[attr-defined]
            env_var = f"{prefix}{field_name.upper()}"
            if field_info.default_factory is not None:
                default = field_info.default_factory()
            else:
                default = field_info.default
            desc = field_info.description or ""

            if isinstance(default, bool):
                val = "true" if default else "false"
            elif default is None:
                val = ""
            elif isinstance(default, (list, dict)):
                val = json.dumps(default)
            else:
                val = str(default)

            if desc:
                lines.append(f"# {desc}")

            lines.append(f"{env_var}={val}")

        lines.append("")

    output = Path(__file__).parent.parent / ".env.example"
    output.write_text("\n".join(lines))
    print(f"Generated {output}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
