# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (c) 2025 Kuba

from __future__ import annotations
from pathlib import Path


class LicenseHeaderError(Exception):
    pass


class FileAccessError(LicenseHeaderError):
    """Soubor nejde přečíst nebo zapsat. Běh se tím končí."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(LicenseHeaderError):
    pass
