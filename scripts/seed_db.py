from __future__ import annotations

from clubhouse.database.bootstrap import ensure_demo_users, init_schema
from clubhouse.main import create_app


def main() -> None:
    app = create_app(AUTO_INIT_DB=False, AUTO_SEED_DB=False)
    container = app.extensions["clubhouse.container"]
    with app.app_context():
        init_schema()
        created = ensure_demo_users(container.auth_service, container.users_repo)
    print(f"OK: Seeded database -> {app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1]} (users created={created})")


if __name__ == "__main__":
    main()
