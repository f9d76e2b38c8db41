# tests/test_submissions.py

"""
Tests for the submission lifecycle (approve / reject).
"""

import pytest

from core.errors import InvalidTransition, NotFoundError, StoreFailure
from models.enums import RejectionPolicy, SubmissionType
from services.submissions import (
    IDEMPOTENCY_KEY,
    SUBMISSIONS_TABLE,
    SubmissionLifecycleManager,
    build_published_row,
)
from models.submission import Submission


def event_submission(**overrides):
    row = {
        "id": "s1",
        "submitter_name": "Ada",
        "submitter_email": "ada@example.com",
        "submission_type": "event",
        "title": "Workshop",
        "description": "CV clinic",
        "date": "2030-05-01",
        "time": "10:00",
        "location": "Lagos",
        "location_type": "physical",
        "is_free": True,
        "link": "https://example.com/workshop",
        "status": "pending",
        "created_at": "2030-04-01T09:00:00Z",
    }
    row.update(overrides)
    return row


def opportunity_submission(**overrides):
    row = {
        "id": "s2",
        "submission_type": "opportunity",
        "title": "Scholarship",
        "description": "Full tuition",
        "deadline": "2030-06-30",
        "eligibility": "Undergraduates",
        "category": "scholarship",
        "is_free": True,
        "link": "https://example.com/apply",
        "status": "pending",
        "created_at": "2030-04-02T09:00:00Z",
    }
    row.update(overrides)
    return row


@pytest.fixture
def manager(store):
    return SubmissionLifecycleManager(store)


# -----------------------------------------------------
# approve
# -----------------------------------------------------
def test_approve_event_publishes_and_removes_submission(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())

    record = manager.approve("s1")

    assert record.kind == "event"
    assert record.title == "Workshop"
    assert record.date == "2030-05-01"
    assert record.source_submission_id == "s1"
    assert len(store.rows("events")) == 1
    assert store.rows(SUBMISSIONS_TABLE) == []


def test_approve_opportunity_is_never_featured(store, manager):
    store.seed(SUBMISSIONS_TABLE, opportunity_submission())

    record = manager.approve("s2")

    assert record.kind == "opportunity"
    assert record.featured is False
    assert store.rows("opportunities")[0]["featured"] is False
    assert store.rows("events") == []


def test_approve_insert_failure_leaves_submission_untouched(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())
    store.fail_on.add(("insert", "events"))

    with pytest.raises(StoreFailure):
        manager.approve("s1")

    assert store.rows("events") == []
    assert store.rows(SUBMISSIONS_TABLE)[0]["status"] == "pending"
    assert ("delete", SUBMISSIONS_TABLE) not in store.calls


def test_approve_delete_failure_leaves_record_in_both_places(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())
    store.fail_on.add(("delete", SUBMISSIONS_TABLE))

    with pytest.raises(StoreFailure):
        manager.approve("s1")

    # Published and still pending: the non-atomic duplicate state
    assert len(store.rows("events")) == 1
    assert store.rows(SUBMISSIONS_TABLE)[0]["status"] == "pending"


def test_retried_approve_reuses_published_row(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())
    store.fail_on.add(("delete", SUBMISSIONS_TABLE))

    with pytest.raises(StoreFailure):
        manager.approve("s1")
    first_id = store.ids("events")[0]

    store.fail_on.clear()
    record = manager.approve("s1")

    assert record.id == first_id
    assert store.ids("events") == [first_id]
    assert store.rows(SUBMISSIONS_TABLE) == []


def test_approve_missing_submission(manager):
    with pytest.raises(NotFoundError):
        manager.approve("missing")


def test_approve_rejected_submission_is_invalid(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission(status="rejected"))

    with pytest.raises(InvalidTransition):
        manager.approve("s1")

    assert store.rows("events") == []


# -----------------------------------------------------
# reject
# -----------------------------------------------------
def test_reject_event_retains_row_as_rejected(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())

    decision = manager.reject("s1")

    assert decision.submission_deleted is False
    assert decision.status == "rejected"
    assert store.rows(SUBMISSIONS_TABLE)[0]["status"] == "rejected"
    assert [s.id for s in manager.list_rejected()] == ["s1"]
    assert manager.list_pending() == ()


def test_reject_opportunity_deletes_row(store, manager):
    store.seed(SUBMISSIONS_TABLE, opportunity_submission())

    decision = manager.reject("s2")

    assert decision.submission_deleted is True
    assert store.rows(SUBMISSIONS_TABLE) == []
    assert store.rows("opportunities") == []


def test_rejection_policy_is_configurable(store):
    store.seed(SUBMISSIONS_TABLE, event_submission(), opportunity_submission())
    manager = SubmissionLifecycleManager(
        store,
        {SubmissionType.event: "delete", SubmissionType.opportunity: RejectionPolicy.retain},
    )

    assert manager.reject("s1").submission_deleted is True
    assert manager.reject("s2").submission_deleted is False
    assert store.ids(SUBMISSIONS_TABLE) == ["s2"]


def test_reject_twice_is_invalid(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())
    manager.reject("s1")

    with pytest.raises(InvalidTransition):
        manager.reject("s1")


def test_reject_store_failure_propagates(store, manager):
    store.seed(SUBMISSIONS_TABLE, event_submission())
    store.fail_on.add(("update", SUBMISSIONS_TABLE))

    with pytest.raises(StoreFailure):
        manager.reject("s1")

    assert store.rows(SUBMISSIONS_TABLE)[0]["status"] == "pending"


# -----------------------------------------------------
# queries & mapping
# -----------------------------------------------------
def test_list_pending_filters_by_type_newest_first(store, manager):
    store.seed(
        SUBMISSIONS_TABLE,
        event_submission(),
        opportunity_submission(),
        event_submission(id="s3", created_at="2030-04-03T09:00:00Z"),
    )

    assert [s.id for s in manager.list_pending()] == ["s3", "s2", "s1"]
    assert [s.id for s in manager.list_pending(SubmissionType.event)] == ["s3", "s1"]


def test_build_published_row_sanitizes_and_keys_row():
    submission = Submission.model_validate(
        event_submission(description="   ", location=" Abuja ")
    )

    row = build_published_row(submission)

    assert row["description"] is None
    assert row["location"] == "Abuja"
    assert row[IDEMPOTENCY_KEY] == "s1"
    assert "submitter_email" not in row
    assert "status" not in row
