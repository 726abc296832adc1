"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
A config file may be empty; every section falls back to its defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from vulnreport.config.settings import (
    AppConfig,
    ColumnsConfig,
    ReadingConfig,
    ReportConfig,
    SeverityConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _section(merged: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config section, rejecting scalars where a mapping is expected."""
    data = merged.get(name) or {}
    if not isinstance(data, dict):
        msg = f"Config section '{name}' must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return _process_config_values(data) if data else {}


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> AppConfig:
    """
    Load tool configuration from YAML file(s).

    Relative source paths are resolved against the directory of the
    main config file so configs can travel with their spreadsheets.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated AppConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        is_self = potential_base.resolve() == config_path.resolve()
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and not is_self
            else {}
        )

    main_data = load_yaml(config_path)
    merged = _deep_merge(base_data, main_data)

    sources_data = merged.get("sources") or []
    if not isinstance(sources_data, list):
        msg = "Config 'sources' must be a list of file paths"
        raise ValueError(msg)
    sources = [
        p if p.is_absolute() else config_path.parent / p
        for p in (Path(str(s)) for s in sources_data)
    ]

    report_data = _section(merged, "report")
    if report_data.get("output_dir"):
        output_dir = Path(str(report_data["output_dir"]))
        if not output_dir.is_absolute():
            output_dir = config_path.parent / output_dir
        report_data = {**report_data, "output_dir": output_dir}

    return AppConfig(
        sources=sources,
        severity=SeverityConfig(**_section(merged, "severity")),
        columns=ColumnsConfig(**_section(merged, "columns")),
        reading=ReadingConfig(**_section(merged, "reading")),
        report=ReportConfig(**report_data),
    )
