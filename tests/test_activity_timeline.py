import inspect

from conftest import (
    make_customer,
    make_enquiry,
    make_quotation,
    make_sales_order,
    make_snapshot,
)

from salesflow.constants.activity_templates import ActivityKind
from salesflow.services.process_flow.activity_timeline import build_activity_timeline
from salesflow.services.process_flow.entity_resolver import resolve_entities


def _timeline(snapshot, **kwargs):
    return list(build_activity_timeline(resolve_entities(snapshot, **kwargs)))


def test_full_deal_emits_five_events_newest_first(full_snapshot):
    events = _timeline(full_snapshot, customer_id="C1")

    assert [e.kind for e in events] == [
        ActivityKind.SALES_ORDER_CREATED,
        ActivityKind.QUOTATION_CLOSED,
        ActivityKind.QUOTATION_SENT,
        ActivityKind.QUOTATION_CREATED,
        ActivityKind.ENQUIRY_CREATED,
    ]
    for newer, older in zip(events, events[1:]):
        assert newer.timestamp >= older.timestamp


def test_closed_event_describes_outcome(full_snapshot):
    closed = next(
        e for e in _timeline(full_snapshot, customer_id="C1")
        if e.kind is ActivityKind.QUOTATION_CLOSED
    )

    assert closed.action == "Quotation accepted"
    assert closed.description == "Quotation QT-2024-Q1 marked Accepted (12,500.00)"
    assert closed.actor_hint == "Customer"


def test_events_without_timestamps_are_skipped():
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry(created_at=None)],
        quotations=[make_quotation(status="Expired", created_at="not-a-date", updated_at=None)],
    )

    assert _timeline(snapshot, customer_id="C1") == []


def test_sent_event_falls_back_to_updated_at_only_while_sent():
    sent = make_snapshot(
        customers=[make_customer()],
        quotations=[make_quotation(status="Sent", updated_at="2024-01-09T08:00:00Z")],
    )
    accepted_without_sent_at = make_snapshot(
        customers=[make_customer()],
        quotations=[make_quotation(status="Accepted", updated_at="2024-01-09T08:00:00Z")],
    )

    sent_kinds = [e.kind for e in _timeline(sent, customer_id="C1")]
    accepted_kinds = [e.kind for e in _timeline(accepted_without_sent_at, customer_id="C1")]

    assert ActivityKind.QUOTATION_SENT in sent_kinds
    assert ActivityKind.QUOTATION_SENT not in accepted_kinds
    assert ActivityKind.QUOTATION_CLOSED in accepted_kinds


def test_draft_quotation_only_has_creation_event():
    snapshot = make_snapshot(
        customers=[make_customer()],
        quotations=[make_quotation(status="Draft", updated_at="2024-01-09T08:00:00Z")],
    )

    assert [e.kind for e in _timeline(snapshot, customer_id="C1")] == [
        ActivityKind.QUOTATION_CREATED
    ]


def test_actor_hint_prefers_record_creator():
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry(created_by="Sarah Johnson")],
        quotations=[make_quotation(status="Expired", updated_at="2024-02-05T00:00:00Z")],
    )

    actors = {e.kind: e.actor_hint for e in _timeline(snapshot, customer_id="C1")}

    assert actors[ActivityKind.ENQUIRY_CREATED] == "Sarah Johnson"
    assert actors[ActivityKind.QUOTATION_CREATED] == "Sales Team"
    assert actors[ActivityKind.QUOTATION_CLOSED] == "System"


def test_timeline_is_a_single_pass_generator(full_snapshot):
    timeline = build_activity_timeline(resolve_entities(full_snapshot, customer_id="C1"))

    assert inspect.isgenerator(timeline)
    assert len(list(timeline)) == 5
    assert list(timeline) == []


def test_mixed_naive_and_aware_timestamps_sort():
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry(created_at="2024-01-01T09:00:00")],
        quotations=[make_quotation(created_at="2024-01-02T09:00:00+04:00")],
        sales_orders=[make_sales_order(created_at="2024-01-03")],
    )

    kinds = [e.kind for e in _timeline(snapshot, customer_id="C1")]

    assert kinds == [
        ActivityKind.SALES_ORDER_CREATED,
        ActivityKind.QUOTATION_CREATED,
        ActivityKind.ENQUIRY_CREATED,
    ]
