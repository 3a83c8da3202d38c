# create_tables.py
import argparse

from event_planner.config.settings import Settings
from event_planner.database import Database
from event_planner.models.user import User, UserRole
from event_planner.utils.security import hash_password


def create_tables(database: Database, drop: bool = False):
    """Create all tables, optionally dropping the existing ones first"""
    if drop:
        database.drop_all()
        print("🗑️  Existing tables dropped")
    database.create_all()
    print("✅ All tables created successfully!")


def create_default_admin(database: Database, settings: Settings):
    """Create the bootstrap admin user if it does not exist yet"""
    with database.session() as db:
        existing = db.query(User).filter(User.email == settings.default_admin_email).first()
        if existing:
            print("ℹ️  Admin user already exists")
            return existing.id

        admin = User(
            name="System Administrator",
            email=settings.default_admin_email,
            hashed_password=hash_password(settings.default_admin_password),
            role=UserRole.ADMIN.value,
        )
        db.add(admin)
        db.commit()
        print("✅ Default admin user created!")
        print(f"   Email: {settings.default_admin_email}")
        print(f"   Password: {settings.default_admin_password}")
        return admin.id


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the Event Planner schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)

    settings = Settings()
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        create_tables(database, drop=args.drop)
        create_default_admin(database, settings)
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
