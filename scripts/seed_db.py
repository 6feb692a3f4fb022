from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from easygestion import create_app
from easygestion.database.bootstrap import ensure_superadmin, seed_default_packages


def main() -> None:
    app = create_app()
    container = app.extensions["easygestion.container"]
    with app.app_context():
        created = seed_default_packages()
        password = app.config.get("SUPERADMIN_PASSWORD")
        seeded = ensure_superadmin(
            username=app.config["SUPERADMIN_USERNAME"],
            email=app.config["SUPERADMIN_EMAIL"],
            password_hash=container.password_hasher.hash(password) if password else None,
        )
        print(f"OK: seeded {created} package(s); super-admin {'created' if seeded else 'unchanged'}")


if __name__ == "__main__":
    main()
