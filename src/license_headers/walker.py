# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (c) 2025 Kuba

from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, Iterator


def walk(root: str | Path, skip_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """
    Projde strom pod `root` (včetně rootu), adresáře i soubory, v seřazeném pořadí.
    Nepřístupné položky se tiše přeskočí. Adresáře se jménem ze `skip_dirs`
    se nevrací a nezanořujeme se do nich. Symlinky na adresáře nesledujeme.
    """
    root = Path(root)
    skip = frozenset(skip_dirs)
    yield root
    # onerror=None -> os.walk chyby (PermissionError apod.) ignoruje
    for dirpath, dirnames, filenames in os.walk(root, onerror=None, followlinks=False):
        dirnames[:] = sorted(d for d in dirnames if d not in skip)
        base = Path(dirpath)
        for name in dirnames:
            yield base / name
        for name in sorted(filenames):
            yield base / name


def iter_files(root: str | Path, skip_dirs: Iterable[str] = ()) -> Iterator[Path]:
    for p in walk(root, skip_dirs):
        try:
            if p.is_file():
                yield p
        except OSError:
            continue
