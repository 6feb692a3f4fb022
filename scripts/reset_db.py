"""Drop every table, recreate the schema and seed the default packages.

Destroys all data; asks for confirmation unless ``--yes`` is given.
"""
from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from easygestion import create_app
from easygestion.database.bootstrap import reset_database


def main() -> None:
    if "--yes" not in sys.argv[1:]:
        answer = input("This deletes ALL data. Type 'reset' to continue: ")
        if answer.strip() != "reset":
            print("Aborted")
            return

    app = create_app()
    with app.app_context():
        reset_database()
        print("OK: database reset")


if __name__ == "__main__":
    main()
