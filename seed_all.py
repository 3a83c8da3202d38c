"""
Master Database Seeding Script
Creates database tables and populates them with demo users, events, tasks
and task updates
"""

import sys
from datetime import date, datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from create_tables import create_default_admin, create_tables
from event_planner.config.settings import Settings
from event_planner.database import Database
from event_planner.models import Event, Task, TaskUpdate, User, UserRole
from event_planner.utils.security import hash_password

DEMO_PASSWORD = "password123"

# Structure: email -> profile; events, tasks and updates reference users by email
DEMO_USERS = [
    {"name": "Admin User", "email": "admin@test.com", "role": UserRole.ADMIN.value},
    {"name": "Regular User 1", "email": "user1@test.com", "role": UserRole.USER.value},
    {"name": "Regular User 2", "email": "user2@test.com", "role": UserRole.USER.value},
]

DEMO_EVENTS = [
    {
        "name": "Team Building Event",
        "description": "Annual team building activities",
        "days_ahead": 30,
        "owner": "user1@test.com",
        "tasks": [
            {
                "name": "Book venue",
                "description": "Find and book a suitable venue",
                "status": "In Progress",
                "days_ahead": 14,
                "created_by": "user1@test.com",
                "updates": [
                    {"text": "Shortlisted three venues, waiting on quotes", "created_by": "user1@test.com"},
                ],
            },
            {
                "name": "Arrange catering",
                "description": "Lunch and snacks for the whole team",
                "status": "To Do",
                "days_ahead": 21,
                "created_by": "user1@test.com",
                "updates": [],
            },
        ],
    },
    {
        "name": "Product Launch",
        "description": "Launch party for the new release",
        "days_ahead": 45,
        "owner": "user2@test.com",
        "tasks": [
            {
                "name": "Send invitations",
                "description": "Invite customers and press",
                "status": "To Do",
                "days_ahead": 20,
                "created_by": "user2@test.com",
                "updates": [
                    {"text": "Guest list drafted", "created_by": "user2@test.com"},
                ],
            },
        ],
    },
]


def seed_demo_users(database: Database) -> dict:
    """Create demo users, skipping any email that already exists"""
    print(f"\n{'='*60}")
    print("🚀 Creating Demo Users")
    print(f"{'='*60}")

    id_mapping = {}
    with database.session() as db:
        for user_data in DEMO_USERS:
            existing_user = db.query(User).filter(User.email == user_data["email"]).first()
            if existing_user:
                print(f"[SKIP] User {user_data['email']} already exists, skipping...")
                id_mapping[user_data["email"]] = existing_user.id
                continue

            user = User(
                name=user_data["name"],
                email=user_data["email"],
                hashed_password=hash_password(DEMO_PASSWORD),
                role=user_data["role"],
            )
            db.add(user)
            db.flush()
            id_mapping[user_data["email"]] = user.id
            print(f"[SUCCESS] Created user: {user.name} ({user.role})")

        db.commit()
    return id_mapping


def seed_demo_events(database: Database, id_mapping: dict) -> int:
    """Create demo events with their tasks and updates.

    Events are matched on (name, owner) so running the script twice does
    not duplicate them.
    """
    print(f"\n{'='*60}")
    print("🚀 Creating Demo Events")
    print(f"{'='*60}")

    created = 0
    today = date.today()
    with database.session() as db:
        for event_data in DEMO_EVENTS:
            owner_id = id_mapping[event_data["owner"]]
            existing_event = (
                db.query(Event)
                .filter(Event.name == event_data["name"], Event.owner_id == owner_id)
                .first()
            )
            if existing_event:
                print(f"[SKIP] Event {event_data['name']} already exists, skipping...")
                continue

            event = Event(
                name=event_data["name"],
                description=event_data["description"],
                date=today + timedelta(days=event_data["days_ahead"]),
                owner_id=owner_id,
            )
            for task_data in event_data["tasks"]:
                task = Task(
                    name=task_data["name"],
                    description=task_data["description"],
                    status=task_data["status"],
                    due_date=today + timedelta(days=task_data["days_ahead"]),
                    created_by=id_mapping[task_data["created_by"]],
                )
                for update_data in task_data["updates"]:
                    task.updates.append(
                        TaskUpdate(
                            update_text=update_data["text"],
                            created_by=id_mapping[update_data["created_by"]],
                        )
                    )
                event.tasks.append(task)

            db.add(event)
            created += 1
            print(f"[SUCCESS] Created event: {event.name} with {len(event.tasks)} tasks")

        db.commit()
    return created


def main():
    """Main function to run all seeding operations"""
    print("🌱 MASTER DATABASE SEEDING SCRIPT")
    print("=" * 60)
    print(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    settings = Settings()
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        create_tables(database)
        create_default_admin(database, settings)
        id_mapping = seed_demo_users(database)
        created_events = seed_demo_events(database, id_mapping)
    except SQLAlchemyError as e:
        print(f"\n[ERROR] Seeding failed: {e}")
        sys.exit(1)
    finally:
        database.dispose()

    print(f"\n{'='*60}")
    print("📊 SEEDING SUMMARY")
    print(f"{'='*60}")
    print(f"Users: {len(id_mapping)}")
    print(f"New events: {created_events}")
    print("\n[INFO] Login Credentials:")
    print(f"   - Admin: {settings.default_admin_email} / {settings.default_admin_password}")
    print(f"   - Demo users: admin@test.com, user1@test.com, user2@test.com / {DEMO_PASSWORD}")
    print(f"\nCompleted at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")


if __name__ == "__main__":
    main()
