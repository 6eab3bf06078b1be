"""Persistent command-line configuration stored as YAML."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_NODE_ADDR = "grpc.trongrid.io:50051"
DEFAULT_TIMEOUT = 20
DEFAULT_PORT = "50051"
CONFIG_FILE_NAME = "config.default"
DOCS_DIR = "tronctl-docs"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


_BOOL_PARAMS = {
    "ledger": "ledger",
    "verbose": "verbose",
    "nopretty": "no_pretty",
    "withTLS": "with_tls",
}


@dataclass
class Config:
    """Connection and output settings."""

    node: str = DEFAULT_NODE_ADDR
    ledger: bool = False
    verbose: bool = False
    timeout: int = DEFAULT_TIMEOUT
    no_pretty: bool = False
    api_key: str = ""
    with_tls: bool = False

    def set(self, param: str, value: str) -> None:
        """Update one setting from its textual value."""
        if param == "node":
            if ":" not in value:
                value = f"{value}:{DEFAULT_PORT}"
            self.node = value
        elif param in _BOOL_PARAMS:
            setattr(self, _BOOL_PARAMS[param], _parse_bool(value))
        elif param == "apiKey":
            self.api_key = value
        else:
            raise KeyError("parameter not found")

    def get(self, param: str) -> Any:
        """Return one setting, or every setting for ``"all"``."""
        if param == "all":
            return self.to_dict()
        if param == "node":
            return self.node
        if param in _BOOL_PARAMS:
            return getattr(self, _BOOL_PARAMS[param])
        if param == "apiKey":
            return self.api_key
        raise KeyError("parameter not found")

    def to_dict(self) -> dict[str, Any]:
        """Return the settings under their file keys."""
        return {
            "node": self.node,
            "ledger": self.ledger,
            "verbose": self.verbose,
            "timeout": self.timeout,
            "noPretty": self.no_pretty,
            "apiKey": self.api_key,
            "withTLS": self.with_tls,
        }


def load_config(path: str | os.PathLike) -> Config:
    """Read a configuration file; keys it lacks take empty values."""
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"malformed config file {os.fspath(path)}")
    return Config(
        node=str(data.get("node") or ""),
        ledger=bool(data.get("ledger", False)),
        verbose=bool(data.get("verbose", False)),
        timeout=int(data.get("timeout") or 0),
        no_pretty=bool(data.get("noPretty", False)),
        api_key=str(data.get("apiKey") or ""),
        with_tls=bool(data.get("withTLS", False)),
    )


def save_config(config: Config, path: str | os.PathLike) -> None:
    """Write the configuration as YAML, readable by the owner only."""
    text = yaml.safe_dump(config.to_dict(), sort_keys=False)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)


def init_config(config_dir: str | os.PathLike | None = None) -> Config:
    """Load the default configuration, creating it when missing or unusable."""
    directory = Path(config_dir) if config_dir is not None else Path.home() / ".config" / "tronctl"
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    path = directory / CONFIG_FILE_NAME
    try:
        config = load_config(path)
    except (OSError, yaml.YAMLError, ValueError, TypeError):
        config = None
    if config is None or not config.node:
        config = Config()
        save_config(config, path)
    return config