from __future__ import annotations

from collections.abc import Mapping
import codecs
from dataclasses import dataclass, replace
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Constraints, Defaults, EnvVars

_LINE_SEPARATOR_NAMES = {"none": "", "lf": "\n", "crlf": "\r\n"}


@dataclass(frozen=True, slots=True)
class WriterConfig:
    perform_indent: bool = Defaults.PERFORM_INDENT
    indent_string: str = Defaults.INDENT_STRING
    line_separator: str = Defaults.LINE_SEPARATOR
    encoding: str = Defaults.ENCODING

    def __post_init__(self) -> None:
        if any(ch not in Constraints.INDENT_CHARACTERS for ch in self.indent_string):
            raise ValueError(
                f"indent_string may only contain spaces and tabs, got {self.indent_string!r}"
            )
        if self.line_separator not in Constraints.ALLOWED_LINE_SEPARATORS:
            raise ValueError(
                f"line_separator must be one of {Constraints.ALLOWED_LINE_SEPARATORS!r}, "
                f"got {self.line_separator!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from exc

    @classmethod
    def compact(cls) -> WriterConfig:
        return cls(perform_indent=False, indent_string="", line_separator="")

    @classmethod
    def pretty(cls, indent: str = Defaults.INDENT_STRING) -> WriterConfig:
        return cls(perform_indent=True, indent_string=indent)

    def with_overrides(
        self,
        *,
        perform_indent: bool | None = None,
        indent_string: str | None = None,
    ) -> WriterConfig:
        config = self
        if perform_indent is not None:
            config = replace(config, perform_indent=perform_indent)
        if indent_string is not None:
            config = replace(config, indent_string=indent_string)
        return config

    @classmethod
    def from_env(cls) -> WriterConfig:
        raw_indent = os.getenv(EnvVars.INDENT)
        perform_indent = (
            raw_indent.strip().lower() in EnvVars.TRUTHY
            if raw_indent
            else Defaults.PERFORM_INDENT
        )
        raw_separator = os.getenv(EnvVars.LINE_SEPARATOR)
        line_separator = (
            _parse_line_separator(raw_separator)
            if raw_separator is not None
            else Defaults.LINE_SEPARATOR
        )
        return cls(
            perform_indent=perform_indent,
            indent_string=os.getenv(EnvVars.INDENT_STRING, Defaults.INDENT_STRING),
            line_separator=line_separator,
            encoding=os.getenv(EnvVars.ENCODING, Defaults.ENCODING),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
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
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        writer = _get_table(data, "writer")
        perform_indent = base_config.perform_indent
        if (value := writer.get("indent")) is not None:
            perform_indent = _coerce_bool(value, key="writer.indent")
        indent_string = base_config.indent_string
        if (value := writer.get("indent_string")) is not None:
            indent_string = str(value)
        line_separator = base_config.line_separator
        if (value := writer.get("line_separator")) is not None:
            line_separator = _parse_line_separator(str(value))
        encoding = base_config.encoding
        if value := writer.get("encoding"):
            encoding = str(value)
        return WriterConfig(
            perform_indent=perform_indent,
            indent_string=indent_string,
            line_separator=line_separator,
            encoding=encoding,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _parse_line_separator(raw: str) -> str:
    return _LINE_SEPARATOR_NAMES.get(raw.strip().lower(), raw)


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in EnvVars.TRUTHY
    raise ValueError(f"{key} must be a bool or string, got {type(value).__name__}")
