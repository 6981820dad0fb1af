# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations
import codecs
from pathlib import Path
from typing import Any, FrozenSet, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError
from .files import DEFAULT_ENCODING
from .header import DEFAULT_COMMENT, DEFAULT_HOLDER, LicenseHeader, build_header

DEFAULT_CONFIG_NAME = ".license-headers.yaml"


def _as_name_set(v: Any) -> FrozenSet[str]:
    # YAML seznam nebo "rs,toml" z příkazové řádky
    if isinstance(v, str):
        v = v.split(",")
    if not isinstance(v, (list, tuple, set, frozenset)):
        raise ValueError(f"čekám seznam jmen, dostal jsem {v!r}")
    return frozenset(str(x).strip() for x in v if str(x).strip())


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    extensions: FrozenSet[str] = frozenset({"rs"})
    skip_dirs: FrozenSet[str] = frozenset({"target"})
    holder: str = DEFAULT_HOLDER
    comment: str = DEFAULT_COMMENT
    year: Optional[int] = None
    encoding: str = DEFAULT_ENCODING

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, v: Any) -> FrozenSet[str]:
        return frozenset(e.lstrip(".") for e in _as_name_set(v))

    @field_validator("skip_dirs", mode="before")
    @classmethod
    def _normalize_skip_dirs(cls, v: Any) -> FrozenSet[str]:
        return _as_name_set(v)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"neznámé kódování: {v}")
        return v

    def header(self) -> LicenseHeader:
        return build_header(self.year, holder=self.holder, comment=self.comment)


def load_yaml(path: str | Path | None) -> dict:
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        print(f"[i] config: soubor nenalezen: {p}")
        return {}
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{p}: neplatný YAML ({e})") from e
    if not isinstance(data, dict):
        print(f"[i] config: {p} není slovník – ignoruji.")
        return {}
    return data


def load_settings(root: str | Path, config_path: str | Path | None = None,
                  overrides: dict | None = None) -> Settings:
    """
    Precedence: defaulty < YAML (--config, jinak .license-headers.yaml v rootu) < volby z CLI.
    None v overrides znamená "nezadáno" a nepřepisuje nic.
    """
    if config_path is None:
        candidate = Path(root) / DEFAULT_CONFIG_NAME
        if candidate.is_file():
            config_path = candidate
    # klíče v YAML smí být i s pomlčkou (skip-dirs)
    data = {str(k).replace("-", "_"): v for k, v in load_yaml(config_path).items()}
    for k, v in (overrides or {}).items():
        if v is not None:
            data[k] = v
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"neplatná konfigurace: {e}") from e
