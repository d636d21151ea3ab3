"""Configuration loading, validation, and override utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator

DEFAULT_ROOT_DIR = "dist"
DEFAULT_BASE_URL = "https://developer.okta.com"
# Autogenerated SDK reference pages are not checked.
DEFAULT_EXCLUDED_PATH_SUBSTRING = "/docs/sdk/"

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "config.schema.json"


@dataclass(frozen=True)
class CheckerConfig:
    root_dir: str = DEFAULT_ROOT_DIR
    base_url: str = DEFAULT_BASE_URL
    excluded_path_substring: str = DEFAULT_EXCLUDED_PATH_SUBSTRING
    ignore_case: bool = False


def load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML file must parse to an object: {path}")
    return data


def load_json(path: Path) -> dict[str, Any]:
    obj = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(obj, dict):
        raise ValueError(f"JSON file must parse to an object: {path}")
    return obj


def validate_with_schema(instance: dict[str, Any], schema: dict[str, Any], name: str) -> None:
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if not errors:
        return

    lines = []
    for err in errors[:20]:
        location = "/".join(str(x) for x in err.path)
        if location:
            lines.append(f"{name}:{location}: {err.message}")
        else:
            lines.append(f"{name}: {err.message}")
    raise ValueError("Config validation failed:\n" + "\n".join(lines))


def apply_overrides(base: CheckerConfig, overrides: dict[str, Any]) -> CheckerConfig:
    """Return a copy of ``base`` with every non-None override applied."""
    known = {f.name for f in fields(base)}
    changes: dict[str, Any] = {}
    for key in sorted(overrides.keys()):
        if key not in known:
            raise KeyError(f"Unknown config key: {key}")
        value = overrides[key]
        if value is None:
            continue
        changes[key] = value
    return replace(base, **changes)


def load_config(
    config_path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
) -> CheckerConfig:
    """Build a config from defaults, an optional YAML file, then CLI overrides."""
    cfg = CheckerConfig()
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        data = load_yaml(config_path)
        validate_with_schema(data, load_json(SCHEMA_PATH), str(config_path))
        cfg = apply_overrides(cfg, data)
    if overrides:
        cfg = apply_overrides(cfg, overrides)
    return cfg
