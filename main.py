"""Development entry point for a source checkout.

`python -m main pipeline patch -a APP -n NAME ...` runs the CLI straight from
the repository root; `src/` is added to the import path first because the
packages are not installed.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
