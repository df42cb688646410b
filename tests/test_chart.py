import pytest

from chart import (
    PALETTE, build_layout, generate_date_range, layout_bar, resolve_drop, shift_order, stats, task_color,
)
from schemas import OrderRecord, Snapshot

CALENDAR = generate_date_range("2024-02-27", "2024-03-02")


def test_generate_date_range_crosses_month_and_leap_day():
    assert CALENDAR == ["2024-02-27", "2024-02-28", "2024-02-29", "2024-03-01", "2024-03-02"]


@pytest.mark.parametrize("start, end", [("2024-03-02", "2024-03-01"), ("", "2024-03-01"), ("bad", "bad")])
def test_generate_date_range_empty(start, end):
    assert generate_date_range(start, end) == []


def test_task_color_prefers_given_color():
    assert task_color("Design", "Bob", "#abcdef") == "#abcdef"


def test_task_color_is_deterministic_palette_entry():
    color = task_color("Design", "Bob")
    assert color in PALETTE
    assert task_color("Design", "Bob", "") == color


def test_task_color_hash_value():
    # "a" -> 97 -> PALETTE[97 % 12]
    assert task_color("a") == PALETTE[1]
    # "ab" -> 97*31 + 98 = 3105 -> 3105 % 12 = 9
    assert task_color("a", "b") == PALETTE[9]


def test_layout_bar_geometry():
    order = OrderRecord(order_code="1", starttime="2024-02-28", endtime="2024-03-01",
                        display_info="Build", resource="Carol-qa", color="#111111")
    bar = layout_bar(order, ["Ann", "Carol-qa"], CALENDAR)
    assert (bar.left, bar.top, bar.width, bar.height) == (82, 102, 236, 46)
    assert bar.color == "#111111"
    assert bar.resource_tag == "Carol"
    assert bar.title == "Build (2024-02-28 - 2024-03-01)"


def test_layout_bar_single_day_width():
    order = OrderRecord(order_code="1", starttime="2024-02-27", endtime="2024-02-27", resource="Ann")
    assert layout_bar(order, ["Ann"], CALENDAR).width == 76


def test_layout_bar_hidden_cases():
    orphan = OrderRecord(order_code="1", starttime="2024-02-27", endtime="2024-02-27", resource="Gone")
    outside = OrderRecord(order_code="2", starttime="2024-02-27", endtime="2024-03-09", resource="Ann")
    assert layout_bar(orphan, ["Ann"], CALENDAR) is None
    assert layout_bar(outside, ["Ann"], CALENDAR) is None


def test_build_layout_and_stats():
    snapshot = Snapshot(
        resources=["Ann"],
        dates=["2024-02-27", "2024-03-02"],
        orders=[
            OrderRecord(order_code="ok", starttime="2024-02-27", endtime="2024-02-28", resource="Ann"),
            OrderRecord(order_code="orphan", starttime="2024-02-27", endtime="2024-02-28", resource="Bob"),
        ],
    )
    chart = build_layout(snapshot)
    assert [b.order_code for b in chart.bars] == ["ok"]
    assert chart.hidden == ["orphan"]
    assert chart.stats == stats(snapshot)
    assert (chart.stats.resources, chart.stats.orders, chart.stats.days) == (1, 2, 5)
    assert (chart.stats.start, chart.stats.end) == ("2024-02-27", "2024-03-02")


def test_resolve_drop_inverts_layout():
    order = OrderRecord(order_code="1", starttime="2024-03-01", endtime="2024-03-02", resource="B")
    bar = layout_bar(order, ["A", "B"], CALENDAR)
    assert resolve_drop(bar.left, bar.top, ["A", "B"], CALENDAR) == (1, 3)


@pytest.mark.parametrize("x, y", [(-1, 60), (400, 60), (10, 49), (10, 150)])
def test_resolve_drop_outside(x, y):
    assert resolve_drop(x, y, ["A", "B"], CALENDAR) is None


def test_shift_order_keeps_duration():
    order = OrderRecord(order_code="1", starttime="2024-02-27", endtime="2024-02-28", resource="A")
    moved = shift_order(order, "B", 2, CALENDAR)
    assert (moved.resource, moved.starttime, moved.endtime) == ("B", "2024-02-29", "2024-03-01")
    assert order.resource == "A"
