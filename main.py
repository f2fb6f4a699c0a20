"""Run jcli from a checkout: `python -m main [--city X] [--bearer T]`.

Puts `src/` on the import path first so the menu works before
`pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from jcli.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
