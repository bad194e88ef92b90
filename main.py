"""Development entry point, no install needed.

    python main.py hello            # Hello, World!
    python main.py hello Ada -s     # ¡Hola, Ada!

The packages live under `src/`; without an editable install they are not
importable, so this script puts `src/` on the path first.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
