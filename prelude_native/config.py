from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class ParserConfig:
    chunk_size: int = Defaults.CHUNK_SIZE
    strict_optional_datetimes: bool = Defaults.STRICT_OPTIONAL_DATETIMES
    report_unknown_elements: bool = Defaults.REPORT_UNKNOWN_ELEMENTS

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @classmethod
    def from_env(cls) -> ParserConfig:
        return cls(
            chunk_size=_coerce_int(
                os.getenv(EnvVars.CHUNK_SIZE, str(Defaults.CHUNK_SIZE)),
                key=EnvVars.CHUNK_SIZE,
            ),
            strict_optional_datetimes=_coerce_bool(
                os.getenv(EnvVars.STRICT_OPTIONAL_DATETIMES, "false"),
                key=EnvVars.STRICT_OPTIONAL_DATETIMES,
            ),
            report_unknown_elements=_coerce_bool(
                os.getenv(EnvVars.REPORT_UNKNOWN_ELEMENTS, "false"),
                key=EnvVars.REPORT_UNKNOWN_ELEMENTS,
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ParserConfig:
        config = ParserConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: ParserConfig) -> ParserConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        parser = _get_table(data, "parser")
        chunk_size = base_config.chunk_size
        if (value := parser.get("chunk_size")) is not None:
            chunk_size = _coerce_int(value, key="parser.chunk_size")
        strict = base_config.strict_optional_datetimes
        if (value := parser.get("strict_optional_datetimes")) is not None:
            strict = _coerce_bool(value, key="parser.strict_optional_datetimes")
        report = base_config.report_unknown_elements
        if (value := parser.get("report_unknown_elements")) is not None:
            report = _coerce_bool(value, key="parser.report_unknown_elements")
        return ParserConfig(
            chunk_size=chunk_size,
            strict_optional_datetimes=strict,
            report_unknown_elements=report,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")
