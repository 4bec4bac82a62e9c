import pytest

from salesflow.services.process_flow.step_overview import (
    build_step_overview,
    progress_percent,
)


def test_overview_marks_each_step():
    overview = build_step_overview(5, (1, 2, 3, 4))

    assert [s.status.value for s in overview[:6]] == [
        "completed", "completed", "completed", "completed", "current", "pending",
    ]
    assert overview[4].name == "Acceptance"
    assert overview[4].path == "/customer-acceptance"
    assert len(overview) == 12


def test_completed_wins_over_current():
    overview = build_step_overview(4, (1, 2, 3, 4))

    assert overview[3].status.value == "completed"


@pytest.mark.parametrize(
    "current, completed, expected",
    [
        (1, (), 8.3),
        (5, (1, 2, 3, 4), 41.7),
        (8, (1, 2, 3, 4, 5, 6, 7), 66.7),
        (12, tuple(range(1, 13)), 100.0),
    ],
)
def test_progress_percent(current, completed, expected):
    assert progress_percent(current, completed) == expected
