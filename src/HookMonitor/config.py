# ============================================================================
# HookMonitor - Configuration Management
#
# Purpose: Load and manage configuration from YAML and env vars
# Inputs: YAML files, environment variables
# Outputs: Config model with all settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = Config.from_default() or Config.from_yaml("path.yaml")
#
# Changelog:
#   2026-10-02: Initial configuration (monitor, report, sink, logging)
#   2026-10-07: Added MonitorConfig.trigger_param for request-driven start
#   2026-10-18: Comma-separated env overrides for list fields; sink export options
# ============================================================================

import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, get_origin

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, field_validator

from HookMonitor.errors import ConfigurationError


class MonitorConfig(BaseModel):
    """Interceptor and trigger configuration."""

    trigger_param: str = "hook_monitor"
    entry_priority: int = -9999
    exit_priority: int = 9999
    kinds: List[Literal["action", "filter"]] = Field(default_factory=lambda: ["action", "filter"])

    @field_validator("kinds")
    @classmethod
    def _kinds_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("at least one hook kind must be instrumented")
        return v


class ReportConfig(BaseModel):
    """Report building and rendering configuration."""

    slow_threshold_seconds: float = 0.1
    precision: int = 2  # decimal places for millisecond display
    template_dir: Optional[str] = None  # None = templates shipped with the package
    template: str = "report.txt"
    top_frequent: int = 10


class SinkConfig(BaseModel):
    """Export sink configuration."""

    type: Literal["local_file"] = "local_file"
    output_dir: str = "runs"
    write_jsonl: bool = False  # also write one JSON object per entry
    json_indent: Optional[int] = None  # None = compact JSON


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config(BaseModel):
    """Root configuration object."""

    monitor: MonitorConfig = Field(default_factory=MonitorConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    sink: SinkConfig = Field(default_factory=SinkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the YAML is invalid or fails validation
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(yaml_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}", details=str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        return cls._validated(cls._apply_env_overrides(data), source=str(path))

    @classmethod
    def from_default(cls) -> "Config":
        """
        Load configuration from configs/default.yaml at the repository root.

        Returns:
            Config instance (plain defaults plus env overrides when the file is absent)

        Raises:
            ConfigurationError: If an override fails validation
        """
        package_root = Path(__file__).parent.parent.parent
        default_config = package_root / "configs" / "default.yaml"

        if default_config.exists():
            return cls.from_yaml(str(default_config))
        return cls._validated(cls._apply_env_overrides(cls().model_dump()), source="defaults")

    @classmethod
    def _validated(cls, data: Dict[str, Any], source: str) -> "Config":
        try:
            return cls(**data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration in {source}", details=str(e)) from e

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables follow the pattern HOOKMONITOR_<SECTION>_<KEY>.
        Keys may contain underscores, so the remainder is matched against the
        field names of each section model rather than split on ``_``.
        Unknown keys are ignored. List fields take comma-separated values.

        Examples:
            HOOKMONITOR_REPORT_SLOW_THRESHOLD_SECONDS=0.25 → data["report"]["slow_threshold_seconds"]
            HOOKMONITOR_LOGGING_LEVEL=DEBUG               → data["logging"]["level"]
            HOOKMONITOR_MONITOR_KINDS=action,filter       → data["monitor"]["kinds"]

        Args:
            data: Configuration dictionary

        Returns:
            Updated configuration dictionary
        """
        prefix = "HOOKMONITOR_"
        # section name -> {field name: annotation} of that section model
        sections = {
            name: {key: info.annotation for key, info in f.annotation.model_fields.items()}
            for name, f in cls.model_fields.items()
        }

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            remainder = env_key[len(prefix) :].lower()

            for section in sorted(sections, key=len, reverse=True):
                section_prefix = section + "_"
                if not remainder.startswith(section_prefix):
                    continue
                field = remainder[len(section_prefix) :]
                if field not in sections[section]:
                    break
                section_data = data.setdefault(section, {})
                if isinstance(section_data, dict):
                    if get_origin(sections[section][field]) is list:
                        items = [v.strip() for v in env_value.split(",")]
                        section_data[field] = [cls._parse_env_value(v) for v in items if v]
                    else:
                        section_data[field] = cls._parse_env_value(env_value)
                break

        return data

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        Parse environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (str, int, float, or bool)
        """
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

