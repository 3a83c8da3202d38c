from datetime import date, timedelta

import pytest

from event_planner.models import Event, Task, TaskUpdate, UserRole
from event_planner.utils.ownership import ResourceKind, owner_chain
from event_planner.utils.scoping import scoped_list, scoped_query


@pytest.fixture
def users(make_user):
    return [make_user() for _ in range(4)]


@pytest.fixture
def dataset(session, users):
    """Events owned by different users with tasks and updates crossing owners."""
    a, b, c, d = (u.id for u in users)
    when = date.today() + timedelta(days=5)
    layout = [
        # (event owner, [(task creator, [update authors])])
        (a, [(a, [a, b]), (b, [c]), (c, [])]),
        (b, [(b, [b]), (a, [d])]),
        (c, [(c, [a, c])]),
        (d, []),
    ]
    for n, (event_owner, tasks) in enumerate(layout):
        event = Event(name=f"Event {n}", date=when, owner_id=event_owner)
        for m, (task_creator, authors) in enumerate(tasks):
            task = Task(name=f"Task {n}.{m}", created_by=task_creator)
            for author in authors:
                task.updates.append(TaskUpdate(update_text=f"note by {author}", created_by=author))
            event.tasks.append(task)
        session.add(event)
    session.commit()


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_scoped_list_matches_owner_chain(session, users, dataset, kind):
    rows = session.query(kind.model).all()
    assert rows

    for requester in users:
        expected = {row.id for row in rows if requester.id in owner_chain(row)}
        visible = {row.id for row in scoped_query(session, requester, kind)}
        assert visible == expected, f"user {requester.id} / {kind.value}"


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_admin_filter_is_unrestricted(session, make_user, dataset, kind):
    admin = make_user(role=UserRole.ADMIN)

    assert scoped_list(admin, kind).unrestricted
    visible = [row.id for row in scoped_query(session, admin, kind)]
    assert visible == sorted(row.id for row in session.query(kind.model).all())


def test_user_filter_is_restricted(users):
    for kind in ResourceKind:
        assert not scoped_list(users[0], kind).unrestricted


def test_event_owner_sees_tasks_created_by_others(session, users, dataset):
    a, b = users[0], users[1]
    names = {task.name for task in scoped_query(session, a, ResourceKind.TASK)}
    # Tasks under a's event created by b and c, plus a's own task under b's event
    assert names == {"Task 0.0", "Task 0.1", "Task 0.2", "Task 1.1"}

    b_names = {task.name for task in scoped_query(session, b, ResourceKind.TASK)}
    assert b_names == {"Task 0.1", "Task 1.0", "Task 1.1"}
