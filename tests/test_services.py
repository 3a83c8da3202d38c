from datetime import date, timedelta

import pytest

from event_planner.errors import ForbiddenError, NotFoundError, ValidationError
from event_planner.models import Event, Task, TaskUpdate, UserRole
from event_planner.services import EventService, TaskService, TaskUpdateService


def in_days(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


@pytest.fixture
def alice(make_user):
    return make_user()


@pytest.fixture
def bob(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(role=UserRole.ADMIN)


@pytest.fixture
def event(session, alice):
    return EventService(session).create(alice, {"name": "Offsite", "date": in_days(14)})


@pytest.fixture
def task(session, alice, event):
    return TaskService(session).create(
        alice, {"eventId": event.id, "name": "Book venue", "dueDate": in_days(7)}
    )


class TestEventService:
    def test_create_sets_owner_and_trims_name(self, session, alice):
        event = EventService(session).create(
            alice, {"name": "  Offsite  ", "description": "Two days out of town", "date": in_days(3)}
        )
        assert event.id is not None
        assert event.owner_id == alice.id
        assert event.name == "Offsite"

    def test_create_accepts_full_timestamp(self, session, alice):
        event = EventService(session).create(
            alice, {"name": "Launch", "date": f"{in_days(2)}T09:30:00.000Z"}
        )
        assert event.date == date.today() + timedelta(days=2)

    def test_create_accepts_today(self, session, alice):
        event = EventService(session).create(alice, {"name": "Standup", "date": in_days(0)})
        assert event.date == date.today()

    @pytest.mark.parametrize("payload,field,message", [
        ({"name": "X", "date": in_days(1)}, "name", "Event name must be between 2 and 100 characters"),
        ({"name": "   ", "date": in_days(1)}, "name", "Event name is required"),
        ({"name": "Offsite", "date": in_days(-1)}, "date", "Event date cannot be in the past"),
        ({"name": "Offsite", "date": in_days(1), "description": "d" * 501}, "description",
         "Description cannot exceed 500 characters"),
    ])
    def test_create_rejects_invalid_input(self, session, alice, payload, field, message):
        with pytest.raises(ValidationError) as exc_info:
            EventService(session).create(alice, payload)

        errors = exc_info.value.errors
        assert {"field": field, "message": message, "location": "body"} in errors
        assert session.query(Event).count() == 0

    def test_list_is_scoped_to_owner(self, session, alice, bob, admin, event):
        EventService(session).create(bob, {"name": "Retro", "date": in_days(5)})

        assert [e.name for e in EventService(session).list(alice)] == ["Offsite"]
        assert [e.name for e in EventService(session).list(bob)] == ["Retro"]
        assert [e.name for e in EventService(session).list(admin)] == ["Offsite", "Retro"]

    def test_partial_update_keeps_unset_fields(self, session, alice, event):
        original_date = event.date
        updated = EventService(session).update(alice, event.id, {"description": "Bring jackets"})

        assert updated.description == "Bring jackets"
        assert updated.name == "Offsite"
        assert updated.date == original_date

    def test_update_by_other_user_is_forbidden_and_changes_nothing(self, session, alice, bob, event):
        with pytest.raises(ForbiddenError):
            EventService(session).update(bob, event.id, {"name": "Hijacked"})

        session.expire_all()
        assert session.get(Event, event.id).name == "Offsite"

    @pytest.mark.parametrize("value", [4102444800, 20300101.0, True, ["2030-01-01"]])
    def test_date_must_be_an_iso_string(self, session, alice, value):
        with pytest.raises(ValidationError) as exc_info:
            EventService(session).create(alice, {"name": "Offsite", "date": value})

        assert exc_info.value.errors == [
            {"field": "date", "message": "Invalid date format. Use YYYY-MM-DD", "location": "body"}
        ]
        assert session.query(Event).count() == 0

    def test_update_rejects_numeric_date(self, session, alice, event):
        original_date = event.date
        with pytest.raises(ValidationError):
            EventService(session).update(alice, event.id, {"date": 4102444800})

        session.expire_all()
        assert session.get(Event, event.id).date == original_date

    def test_update_validates_before_touching_store(self, session, bob):
        # Invalid input wins over the missing resource
        with pytest.raises(ValidationError):
            EventService(session).update(bob, 999, {"date": in_days(-3)})

    def test_admin_can_update_any_event(self, session, admin, event):
        updated = EventService(session).update(admin, event.id, {"name": "Company offsite"})
        assert updated.name == "Company offsite"

    def test_delete_cascades_to_tasks_and_updates(self, session, alice, event, task):
        TaskUpdateService(session).create(alice, {"taskId": task.id, "updateText": "Venue booked"})
        assert session.query(TaskUpdate).count() == 1

        EventService(session).delete(alice, event.id)

        assert session.query(Event).count() == 0
        assert session.query(Task).count() == 0
        assert session.query(TaskUpdate).count() == 0

    def test_get_missing_event(self, session, admin):
        with pytest.raises(NotFoundError):
            EventService(session).get(admin, 42)

    def test_list_tasks_of_event(self, session, alice, bob, event, task):
        assert [t.id for t in EventService(session).list_tasks(alice, event.id)] == [task.id]
        with pytest.raises(ForbiddenError):
            EventService(session).list_tasks(bob, event.id)


class TestTaskService:
    def test_create_defaults_status(self, session, alice, task):
        assert task.status == "To Do"
        assert task.created_by == alice.id

    def test_create_requires_existing_event(self, session, alice):
        with pytest.raises(NotFoundError) as exc_info:
            TaskService(session).create(alice, {"eventId": 404, "name": "Ghost", "dueDate": in_days(1)})
        assert exc_info.value.message == "Event not found"

    def test_create_under_foreign_event_is_forbidden(self, session, bob, event):
        with pytest.raises(ForbiddenError):
            TaskService(session).create(bob, {"eventId": event.id, "name": "Sneak in", "dueDate": in_days(1)})
        assert session.query(Task).count() == 0

    def test_admin_can_create_under_any_event(self, session, admin, event):
        task = TaskService(session).create(
            admin, {"eventId": event.id, "name": "Approve budget", "dueDate": in_days(1)}
        )
        assert task.created_by == admin.id

    def test_due_date_required_on_create(self, session, alice, event):
        with pytest.raises(ValidationError) as exc_info:
            TaskService(session).create(alice, {"eventId": event.id, "name": "No deadline"})
        assert any(err["field"] == "dueDate" for err in exc_info.value.errors)

    @pytest.mark.parametrize("value", [True, False])
    def test_event_id_rejects_booleans(self, session, alice, event, value):
        with pytest.raises(ValidationError) as exc_info:
            TaskService(session).create(alice, {"eventId": value, "name": "Boolish", "dueDate": in_days(1)})

        assert {"field": "eventId", "message": "Event ID must be an integer", "location": "body"} in exc_info.value.errors
        assert session.query(Task).count() == 0

    def test_event_id_accepts_numeric_string(self, session, alice, event):
        task = TaskService(session).create(
            alice, {"eventId": str(event.id), "name": "Stringly", "dueDate": in_days(1)}
        )
        assert task.event_id == event.id

    def test_due_date_rejects_timestamp_number(self, session, alice, task):
        with pytest.raises(ValidationError) as exc_info:
            TaskService(session).update(alice, task.id, {"dueDate": 4102444800})
        assert exc_info.value.errors[0]["message"] == "Invalid date format. Use YYYY-MM-DD"

    def test_update_status(self, session, alice, task):
        updated = TaskService(session).update(alice, task.id, {"status": "Completed"})
        assert updated.status == "Completed"
        assert updated.name == "Book venue"

    def test_delete_by_outsider_then_owner(self, session, alice, bob, task):
        with pytest.raises(ForbiddenError):
            TaskService(session).delete(bob, task.id)

        TaskService(session).delete(alice, task.id)
        with pytest.raises(NotFoundError):
            TaskService(session).get(alice, task.id)

    def test_list_updates(self, session, alice, bob, task):
        service = TaskUpdateService(session)
        first = service.create(alice, {"taskId": task.id, "updateText": "Shortlisted venues"})
        second = service.create(alice, {"taskId": task.id, "updateText": "Booked"})

        assert [u.id for u in TaskService(session).list_updates(alice, task.id)] == [first.id, second.id]
        with pytest.raises(ForbiddenError):
            TaskService(session).list_updates(bob, task.id)


class TestTaskUpdateService:
    def test_create_requires_task_access(self, session, alice, bob, task):
        with pytest.raises(ForbiddenError):
            TaskUpdateService(session).create(bob, {"taskId": task.id, "updateText": "Not mine"})

        with pytest.raises(NotFoundError) as exc_info:
            TaskUpdateService(session).create(alice, {"taskId": 12345, "updateText": "Lost"})
        assert exc_info.value.message == "Task not found"

    def test_task_id_rejects_booleans(self, session, alice, task):
        with pytest.raises(ValidationError) as exc_info:
            TaskUpdateService(session).create(alice, {"taskId": True, "updateText": "Boolish"})

        assert {"field": "taskId", "message": "Task ID must be an integer", "location": "body"} in exc_info.value.errors
        assert session.query(TaskUpdate).count() == 0

    def test_update_text_is_trimmed_and_bounded(self, session, alice, task):
        service = TaskUpdateService(session)
        update = service.create(alice, {"taskId": task.id, "updateText": "  Venue booked  "})
        assert update.update_text == "Venue booked"

        with pytest.raises(ValidationError) as exc_info:
            service.update(alice, update.id, {"updateText": "x" * 501})
        assert exc_info.value.errors[0]["message"] == "Update text must be between 1 and 500 characters"

    def test_edit_and_delete(self, session, alice, bob, task):
        service = TaskUpdateService(session)
        update = service.create(alice, {"taskId": task.id, "updateText": "Draft"})

        edited = service.update(alice, update.id, {"updateText": "Final"})
        assert edited.update_text == "Final"

        with pytest.raises(ForbiddenError):
            service.delete(bob, update.id)
        service.delete(alice, update.id)
        assert session.query(TaskUpdate).count() == 0

    def test_list_scoped_to_chain(self, session, alice, bob, admin, task):
        TaskUpdateService(session).create(alice, {"taskId": task.id, "updateText": "Progress"})

        assert len(TaskUpdateService(session).list(alice)) == 1
        assert TaskUpdateService(session).list(bob) == []
        assert len(TaskUpdateService(session).list(admin)) == 1
