# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations
import sys, subprocess
from pathlib import Path

def main() -> int:
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    if not root.is_dir():
        print(f"[pre-commit] {root} není adresář – kontrolu hlaviček přeskakuji.")
        return 0
    cmd = [sys.executable, "-m", "license_headers", "check", str(root)]
    print(f"[pre-commit] Spouštím: {' '.join(cmd)}")
    res = subprocess.run(cmd)
    return res.returncode

if __name__ == "__main__":
    raise SystemExit(main())
