# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (c) 2025 Kuba

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

DEFAULT_HOLDER = "Google LLC"
DEFAULT_COMMENT = "//"

# {comment} = značka komentáře, první řádek si skládá build_header sám
APACHE_BODY = """\
{comment}
{comment} Licensed under the Apache License, Version 2.0 (the "License");
{comment} you may not use this file except in compliance with the License.
{comment} You may obtain a copy of the License at
{comment}
{comment}      http://www.apache.org/licenses/LICENSE-2.0
{comment}
{comment} Unless required by applicable law or agreed to in writing, software
{comment} distributed under the License is distributed on an "AS IS" BASIS,
{comment} WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
{comment} See the License for the specific language governing permissions and
{comment} limitations under the License.
"""


@dataclass(frozen=True)
class LicenseHeader:
    marker: str
    text: str


def current_year() -> int:
    return datetime.now(timezone.utc).year


def build_header(year: int | None = None, holder: str = DEFAULT_HOLDER,
                 comment: str = DEFAULT_COMMENT) -> LicenseHeader:
    """
    Složí hlavičku pro daný rok (default = aktuální rok v UTC).
    Text vždy začíná `marker` a končí jedním '\\n'.
    """
    if year is None:
        year = current_year()
    marker = f"{comment} Copyright"
    first = f"{marker} {year} {holder}\n"
    return LicenseHeader(marker=marker, text=first + APACHE_BODY.format(comment=comment))
