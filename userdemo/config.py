"""Application settings: server and database sections."""

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

_TRUE = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE = {"0", "f", "F", "false", "FALSE", "False"}


def _to_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{name}: expected an integer, got {value!r}")


def _to_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


def _section(mapping: Mapping, key: str) -> Mapping:
    value = mapping.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{key}: expected a mapping, got {value!r}")
    return value


@dataclass
class ServerConfig:
    """Where the HTTP server listens."""

    port: int = 18080
    domain: str = ""


@dataclass
class DatabaseConfig:
    """How to reach the database, and whether to use one at all."""

    url: str = ""
    enabled: bool = False


@dataclass
class AppConfig:
    """All settings the application reads."""

    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "AppConfig":
        """Build settings from a nested mapping, filling in defaults."""
        server = _section(mapping, "server")
        database = _section(mapping, "database")
        return cls(
            server=ServerConfig(
                port=_to_int(server.get("port", 18080), "server.port"),
                domain=str(server.get("domain", "") or ""),
            ),
            database=DatabaseConfig(
                url=str(database.get("url", "") or ""),
                enabled=_to_bool(database.get("enabled", False), "database.enabled"),
            ),
        )


def _merge(target: dict, source: Mapping) -> None:
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _merge(target[key], value)
        else:
            target[key] = value


def _read_properties(path: Path) -> dict:
    parser = configparser.ConfigParser(delimiters=("=", ":"), comment_prefixes=("#", "!"),
                                       interpolation=None)
    parser.optionxform = str
    parser.read_string("[root]\n" + path.read_text(encoding="utf-8"))
    nested: dict = {}
    for key, value in parser.items("root"):
        *parents, leaf = key.split(".")
        node = nested
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
    return nested


def _read_yaml(path: Path) -> dict:
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, Mapping):
        raise ValueError(f"{path}: top level must be a mapping")
    return dict(loaded)


def load_config(directory: Union[str, Path] = "./config") -> AppConfig:
    """Read app.properties, app.yaml and app.yml from a directory, later ones winning."""
    base = Path(directory)
    merged: dict = {}
    readers = (
        ("app.properties", _read_properties),
        ("app.yaml", _read_yaml),
        ("app.yml", _read_yaml),
    )
    for name, reader in readers:
        path = base / name
        if path.is_file():
            _merge(merged, reader(path))
    return AppConfig.from_mapping(merged)