# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (c) 2025 Kuba

# -*- coding: utf-8 -*-
"""
Jádro: rozhodne, jestli soubor potřebuje hlavičku, a vrátí nový obsah.

Stavy hlavičky:
  - CURRENT   – obsah začíná přesně aktuální hlavičkou → nic nedělat
  - STALE     – začíná značkou (např. '// Copyright'), ale ne celou hlavičkou;
                tělo = vše za první prázdnou řádkou
  - MALFORMED – STALE bez prázdné řádky až do konce → necháme být, bez chyby
  - ABSENT    – značka chybí → tělo = '\\n' + původní obsah

Čtení a zápis jsou injektované funkce (read_file / write_file),
v testech se dají nahradit slovníkem v paměti.
"""
from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from .header import LicenseHeader
from .walker import iter_files

ReadFile = Callable[[Path], str]
WriteFile = Callable[[Path, str], None]

BLANK_LINES = ("\n", "\r\n")


class HeaderState(Enum):
    CURRENT = "current"
    STALE = "stale"
    MALFORMED = "malformed"
    ABSENT = "absent"


def _lines_inclusive(text: str) -> Iterable[str]:
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end + 1]
        start = end + 1


def _body_after_blank_line(content: str) -> Optional[str]:
    index = 0
    for line in _lines_inclusive(content):
        index += len(line)
        if line in BLANK_LINES:
            return content[index:]
    return None


def _split(content: str, header: LicenseHeader) -> Tuple[HeaderState, Optional[str]]:
    # (stav, tělo) – tělo je None, když se nic přepisovat nemá
    if content.startswith(header.text):
        return HeaderState.CURRENT, None
    if content.startswith(header.marker):
        body = _body_after_blank_line(content)
        if body is None:
            return HeaderState.MALFORMED, None
        return HeaderState.STALE, body
    return HeaderState.ABSENT, "\n" + content


def classify(content: str, header: LicenseHeader) -> HeaderState:
    return _split(content, header)[0]


def needs_license_header(content: str, header: LicenseHeader) -> Optional[str]:
    """Vrátí tělo souboru (bez staré hlavičky), pokud je potřeba hlavičku doplnit, jinak None."""
    return _split(content, header)[1]


def is_licensed_path(path: Path, extensions: Iterable[str]) -> bool:
    suffix = Path(path).suffix
    if not suffix:
        return False
    return suffix[1:] in extensions


def process(path: Path, read_file: ReadFile, header: LicenseHeader,
            extensions: Iterable[str]) -> Optional[str]:
    """Nový obsah souboru s hlavičkou, nebo None (soubor se nečte / nemění)."""
    if not is_licensed_path(path, extensions):
        return None
    body = needs_license_header(read_file(path), header)
    if body is None:
        return None
    return header.text + body


def check_and_generate_license_headers(
    root: str | Path,
    read_file: ReadFile,
    write_file: WriteFile,
    header: LicenseHeader,
    extensions: Iterable[str],
    skip_dirs: Iterable[str] = (),
    *,
    dry_run: bool = False,
    on_change: Callable[[Path, str, str], None] | None = None,
) -> List[Path]:
    """
    Projde strom a každému povolenému souboru doplní/přepíše hlavičku.
    - dry_run=True: nic nezapisuje, jen vrátí seznam souborů k úpravě.
    - on_change(path, old, new): volá se pro každý měněný soubor (např. kvůli diffu).
    Chyby čtení/zápisu (FileAccessError) se nepřekládají – běh končí hned.
    """
    extensions = frozenset(extensions)
    originals: dict[Path, str] = {}

    def _read(p: Path) -> str:
        originals[p] = read_file(p)
        return originals[p]

    changed: List[Path] = []
    for path in iter_files(root, skip_dirs):
        new_content = process(path, _read, header, extensions)
        original = originals.pop(path, "")
        if new_content is None:
            continue
        if on_change is not None:
            on_change(path, original, new_content)
        if not dry_run:
            write_file(path, new_content)
        changed.append(path)
    return changed
