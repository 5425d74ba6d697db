from __future__ import annotations

from clubhouse.database.bootstrap import init_schema, list_tables
from clubhouse.main import create_app


def main() -> None:
    app = create_app(AUTO_INIT_DB=False, AUTO_SEED_DB=False)
    with app.app_context():
        init_schema()
        tables = list_tables()
    print(f"OK: Created schema -> {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]} (tables={len(tables)})")


if __name__ == "__main__":
    main()
