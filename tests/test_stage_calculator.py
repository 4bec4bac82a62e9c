import pytest

from conftest import (
    make_customer,
    make_enquiry,
    make_quotation,
    make_sales_order,
    make_snapshot,
)

from salesflow.schemas.process_flow.process_flow_schemas import ResolvedEntities
from salesflow.services.process_flow.entity_resolver import resolve_entities
from salesflow.services.process_flow.process_flow_service import recompute
from salesflow.services.process_flow.stage_calculator import calculate_stage


def _stage(snapshot, **kwargs):
    return calculate_stage(resolve_entities(snapshot, **kwargs))


def test_nothing_resolved_leaves_customer_step_pending():
    stage = calculate_stage(ResolvedEntities())

    assert stage.current_step == 1
    assert stage.completed_steps == ()
    assert stage.next_action is None


def test_customer_without_enquiry_or_quotation():
    stage = _stage(make_snapshot(customers=[make_customer()]), customer_id="C1")

    assert stage.current_step == 2
    assert stage.completed_steps == (1,)


def test_sent_quotation_after_enquiry():
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry(enquiry_date="2024-01-01")],
        quotations=[make_quotation(status="Sent", quote_date="2024-01-05")],
    )

    stage = _stage(snapshot, customer_id="C1")

    assert stage.completed_steps == (1, 2, 3, 4)
    assert stage.current_step == 5


def test_accepted_quotation_without_sales_order():
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry()],
        quotations=[make_quotation(status="Accepted")],
    )

    stage = _stage(snapshot, customer_id="C1")

    assert stage.completed_steps == (1, 2, 3, 4, 5, 6)
    assert stage.current_step == 7
    assert stage.next_action.action_verb == "Create"


def test_accepted_quotation_with_sales_order(full_snapshot):
    stage = _stage(full_snapshot, customer_id="C1")

    assert stage.completed_steps == (1, 2, 3, 4, 5, 6, 7)
    assert stage.current_step == 8


def test_rejected_by_customer_stops_before_acceptance():
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry()],
        quotations=[make_quotation(status="Rejected by Customer")],
    )

    stage = _stage(snapshot, customer_id="C1")

    assert 4 in stage.completed_steps
    assert 5 not in stage.completed_steps
    assert 6 not in stage.completed_steps
    assert stage.current_step == 5


@pytest.mark.parametrize(
    "status, completed, current",
    [
        ("Draft", (1, 2, 3), 4),
        ("Under Review", (1, 2, 3), 4),
        ("Approved", (1, 2, 3), 4),
        ("Sent", (1, 2, 3, 4), 5),
        ("Accepted", (1, 2, 3, 4, 5, 6), 7),
        ("Rejected", (1, 2, 3), 4),
        ("Rejected by Customer", (1, 2, 3, 4), 5),
        ("Expired", (1, 2, 3), 4),
    ],
)
def test_each_status_matches_action_table(status, completed, current):
    snapshot = make_snapshot(
        customers=[make_customer()],
        enquiries=[make_enquiry()],
        quotations=[make_quotation(status=status)],
    )

    stage = _stage(snapshot, customer_id="C1")

    assert stage.completed_steps == completed
    assert stage.current_step == current


def test_missing_enquiry_under_reports_instead_of_failing():
    snapshot = make_snapshot(
        customers=[make_customer()],
        quotations=[make_quotation(status="Sent")],
    )

    stage = _stage(snapshot, customer_id="C1")

    assert stage.completed_steps == (1, 3, 4)
    assert stage.current_step == 5


def test_unknown_status_is_reported():
    snapshot = make_snapshot(
        customers=[make_customer()],
        quotations=[make_quotation(status="On Hold")],
    )

    stage = _stage(snapshot, customer_id="C1")

    assert stage.unknown_status == "On Hold"
    assert stage.current_step == 4
    assert stage.completed_steps == (1, 3)


def test_adding_entities_never_removes_completed_steps():
    customer = make_customer()
    enquiry = make_enquiry()
    quotation = make_quotation(status="Accepted")
    order = make_sales_order()

    growth = [
        make_snapshot(customers=[customer]),
        make_snapshot(customers=[customer], enquiries=[enquiry]),
        make_snapshot(customers=[customer], enquiries=[enquiry], quotations=[quotation]),
        make_snapshot(
            customers=[customer],
            enquiries=[enquiry],
            quotations=[quotation],
            sales_orders=[order],
        ),
    ]

    previous = set()
    for snapshot in growth:
        completed = set(_stage(snapshot, customer_id="C1").completed_steps)
        assert previous <= completed
        previous = completed


def test_newer_quotation_becomes_the_target():
    converted = make_quotation(id="Q1", status="Accepted")
    order = make_sales_order(quotation_id="Q1")
    before = make_snapshot(
        customers=[make_customer()],
        quotations=[converted],
        sales_orders=[order],
    )
    after = make_snapshot(
        customers=[make_customer()],
        quotations=[converted, make_quotation(id="Q2", quote_date="2024-02-01T10:00:00Z")],
        sales_orders=[order],
    )

    assert _stage(before, customer_id="C1").completed_steps == (1, 3, 4, 5, 6, 7)

    latest = _stage(after, customer_id="C1")
    assert latest.completed_steps == (1, 3)
    assert latest.current_step == 4

    pinned = _stage(after, customer_id="C1", quotation_id="Q1")
    assert pinned.completed_steps == (1, 3, 4, 5, 6, 7)
    assert pinned.current_step == 8


def test_recompute_is_idempotent(full_snapshot):
    first = recompute(full_snapshot, customer_id="C1")
    second = recompute(full_snapshot, customer_id="C1")

    assert first == second
    assert first.current_step_name == "Supplier LPO"
