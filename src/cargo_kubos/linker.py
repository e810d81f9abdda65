"""Cross-linker lookup in the user's Cargo config ($CARGO_HOME/config).

Each stage takes the previous value and returns the next one or None. The first None ends
the lookup, so an unset CARGO_HOME, a missing or unreadable file, bad TOML and a missing or
non-string [target.<triplet>] linker all come out as "no override" rather than an error.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

import tomli

log = logging.getLogger(__name__)

# Cargo reads the extensionless name first; config.toml is the newer spelling.
CARGO_CONFIG_NAMES = ("config", "config.toml")


def _chain(value: Any, *stages: Callable[[Any], Any]) -> Any:
    """Feed value through stages in order, stopping at the first None."""
    for stage in stages:
        if value is None:
            return None
        value = stage(value)
    return value


def _cargo_home(environ: Mapping[str, str]) -> Path | None:
    home = environ.get("CARGO_HOME")
    if not home:
        log.debug("CARGO_HOME is not set, no linker override")
        return None
    return Path(home)


def _config_path(cargo_home: Path) -> Path | None:
    for name in CARGO_CONFIG_NAMES:
        p = cargo_home / name
        try:
            if p.is_file():
                return p
        except OSError as e:
            log.debug("Could not stat Cargo config %s: %s", p, e)
    log.debug("No Cargo config in %s", cargo_home)
    return None


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Could not read Cargo config %s: %s", path, e)
        return None


def _parse_toml(text: str) -> dict[str, Any] | None:
    try:
        return tomli.loads(text)
    except tomli.TOMLDecodeError as e:
        log.debug("Could not parse Cargo config: %s", e)
        return None


def _table(key: str, doc: dict[str, Any]) -> dict[str, Any] | None:
    value = doc.get(key)
    if not isinstance(value, dict):
        log.debug("Cargo config has no [%s] table", key)
        return None
    return value


def _linker(target_table: dict[str, Any]) -> str | None:
    value = target_table.get("linker")
    if not isinstance(value, str):
        log.debug("Cargo config target has no string linker: %r", value)
        return None
    return value


def cargo_linker(triplet: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return [target.<triplet>] linker from the Cargo config, or None when unavailable.

    environ defaults to os.environ; only CARGO_HOME is read from it.
    """
    return _chain(
        os.environ if environ is None else environ,
        _cargo_home,
        _config_path,
        _read_text,
        _parse_toml,
        partial(_table, "target"),
        partial(_table, triplet),
        _linker,
    )
