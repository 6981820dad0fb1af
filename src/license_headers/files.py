# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (c) 2025 Kuba

from __future__ import annotations
from pathlib import Path

from .errors import FileAccessError

DEFAULT_ENCODING = "utf-8"


# newline="" -> konce řádků necháváme tak, jak v souboru jsou (\r\n zůstane)
def read_file(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(path, f"není platný text v {encoding} ({e.reason})") from e
    except OSError as e:
        raise FileAccessError(path, f"nejde přečíst: {e.strerror or e}") from e


def write_file(path: Path, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(path, f"nejde zapsat: {e.strerror or e}") from e
