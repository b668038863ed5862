# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Decli option and argument declarations.

A declaration file is YAML or TOML:

    program: my-tool
    options:
      - name: verbose
        bool: true
      - name: types
        list: true
        default: [txt, rtf]
        check: "^[a-z]+$"
    arguments:
      - name: filter
        alias: [f]
        handler: my_module.filter_handler
        description: Filter files by type

`check` is one of the builtin tags ("file", "dir", "number") or a regular
expression. `handler`, `transform`, `trigger` and `predicate` are dotted import
paths. List defaults are wrapped in a producer so parses never share them.
"""
from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from decli.exceptions import ConfigError
from decli.importer import resolve_callable
from decli.logger import logger
from decli.parser.checks import CheckType
from decli.parser.parser_types import NO_DESCRIPTION
from decli.parser.registry import Registry


def _import(path: str | None) -> Callable[..., Any] | None:
    if path is None:
        return None
    try:
        return resolve_callable(path)
    except (ImportError, ValueError) as error:
        logger.error("Failed to import '%s': %s", path, error)
        raise ConfigError(f"Could not import '{path}': {error}") from error


def _freeze_default(value: Any) -> Any:
    if isinstance(value, (list, dict)):
        return lambda: _copy(value)
    return value


def _copy(value: Any) -> Any:
    if isinstance(value, list):
        return [_copy(item) for item in value]
    if isinstance(value, dict):
        return {key: _copy(item) for key, item in value.items()}
    return value


class RawOption(BaseModel):
    """Raw option model for Decli configuration."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    alias: list[str] = Field(default_factory=list)
    is_list: bool = Field(default=False, alias="list")
    is_bool: bool = Field(default=False, alias="bool")
    default: Any = None
    check: str | None = None
    predicate: str | None = None
    transform: str | None = None
    trigger: str | None = None
    description: str = NO_DESCRIPTION

    @field_validator("alias", mode="before")
    @classmethod
    def validate_alias(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @model_validator(mode="after")
    def validate_check(self) -> RawOption:
        if self.check is not None and self.predicate is not None:
            raise ValueError("'check' and 'predicate' are mutually exclusive")
        return self

    def get_check(self) -> Any:
        if self.predicate is not None:
            return _import(self.predicate)
        if self.check is None:
            return None
        if self.check in CheckType.builtin_tags():
            return self.check
        try:
            return re.compile(self.check)
        except re.error as error:
            raise ConfigError(
                f"Invalid check pattern for '{self.name}': {error}"
            ) from error

    def to_config(self) -> dict[str, Any]:
        config: dict[str, Any] = {
            "alias": self.alias,
            "list": self.is_list,
            "bool": self.is_bool,
            "description": self.description,
        }
        if "default" in self.model_fields_set:
            config["default"] = _freeze_default(self.default)
        check = self.get_check()
        if check is not None:
            config["check"] = check
        if self.transform:
            config["transform"] = _import(self.transform)
        if self.trigger:
            config["trigger"] = _import(self.trigger)
        return config


class RawArgument(BaseModel):
    """Raw argument model for Decli configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    handler: str
    alias: list[str] = Field(default_factory=list)
    description: str = NO_DESCRIPTION

    @field_validator("alias", mode="before")
    @classmethod
    def validate_alias(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def to_config(self) -> dict[str, Any]:
        return {
            "handler": _import(self.handler),
            "alias": self.alias,
            "description": self.description,
        }


class DecliConfig(BaseModel):
    """Decli declaration file model."""

    model_config = ConfigDict(extra="forbid")

    program: str | None = None
    options: list[RawOption] = Field(default_factory=list)
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_registry(self) -> Registry:
        registry = Registry()
        for option in self.options:
            registry.add_opt(option.name, **option.to_config())
        for argument in self.arguments:
            registry.add_arg(argument.name, **argument.to_config())
        return registry


def find_decli_config() -> Path | None:
    candidates = [
        Path.cwd() / "decli.yaml",
        Path.cwd() / "decli.yml",
        Path.cwd() / "decli.toml",
        Path(os.environ.get("DECLI_CONFIG", "decli.yaml")),
        Path.home() / ".config" / "decli" / "decli.yaml",
        Path.home() / ".config" / "decli" / "decli.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def read_config(file_path: Path | str) -> DecliConfig:
    """
    Read and validate a YAML or TOML declaration file.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is not a mapping.
        pydantic.ValidationError: If the content does not match the schema.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with options and arguments.\n"
            "Example:\n"
            "options:\n"
            "  - name: verbose\n"
            "    bool: true\n"
            "arguments:\n"
            "  - name: run\n"
            "    handler: my_module.run"
        )

    logger.debug("Loaded config file '%s'", path)
    return DecliConfig.model_validate(raw_config)


def loader(file_path: Path | str) -> Registry:
    """
    Build a `Registry` from a YAML or TOML declaration file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        Registry: The declared options and arguments.

    Raises:
        ConfigError: If a declaration is invalid or a dotted path cannot be imported.
    """
    return read_config(file_path).to_registry()
