from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from easygestion import create_app
from easygestion.database.bootstrap import init_schema, list_tables


def main() -> None:
    app = create_app()
    with app.app_context():
        init_schema()
        print(f"OK: schema ready (tables={len(list_tables())})")


if __name__ == "__main__":
    main()
