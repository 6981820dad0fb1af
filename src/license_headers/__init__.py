# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (c) 2025 Kuba

__version__ = "0.1.0"
