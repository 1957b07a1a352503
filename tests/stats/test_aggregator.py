from __future__ import annotations

from datetime import date, timedelta

from src.daily_mate.daily_mate.stats.aggregator import compute_monthly_stats
from src.daily_mate.daily_mate.workdays.model import WorkDayView, WorkplaceRef

CAFE = WorkplaceRef(workplace_id=1, name="Kafe", color="#3B82F6", daily_wage=500)
DEPO = WorkplaceRef(workplace_id=2, name="Depo", color="#10B981", daily_wage=800)
OFIS = WorkplaceRef(workplace_id=3, name="Ofis", color="#F59E0B", daily_wage=300)


def _day(d: date, wp: WorkplaceRef, wage: float, wid: int = 0) -> WorkDayView:
    return WorkDayView(work_day_id=wid, work_date=d, wage_on_that_day=wage, workplace=wp)


def test_march_2024_example():
    rows = [
        _day(date(2024, 3, 5), CAFE, 500, 1),
        _day(date(2024, 3, 6), CAFE, 500, 2),
        _day(date(2024, 3, 10), DEPO, 800, 3),
    ]

    report = compute_monthly_stats(rows, 3, 2024)

    assert report.period.month == 3
    assert report.period.year == 2024
    assert report.period.month_name == "Mart"
    assert report.summary.total_earnings == 1800
    assert report.summary.total_work_days == 3
    assert report.summary.average_daily_earning == 600
    assert report.summary.workplace_count == 2

    a, b = report.workplace_breakdown
    assert (a.workplace_id, a.total_days, a.total_earnings, a.average_wage, a.percentage) == (1, 2, 1000, 500, 56)
    assert (b.workplace_id, b.total_days, b.total_earnings, b.average_wage, b.percentage) == (2, 1, 800, 800, 44)

    assert report.most_worked_workplace.workplace_id == 1
    assert report.most_worked_workplace.days == 2
    assert report.highest_earning_workplace.workplace_id == 1
    assert report.highest_earning_workplace.earnings == 1000


def test_empty_input_is_a_valid_report():
    report = compute_monthly_stats([], 2, 2024)

    assert report.summary.total_earnings == 0
    assert report.summary.total_work_days == 0
    assert report.summary.average_daily_earning == 0
    assert report.summary.workplace_count == 0
    assert report.most_worked_workplace is None
    assert report.highest_earning_workplace is None
    assert report.workplace_breakdown == []
    assert report.weekly_distribution == []

    data = report.to_dict()
    assert data["insights"] == {"mostWorkedWorkplace": None, "highestEarningWorkplace": None}
    assert data["period"]["monthName"] == "Şubat"


def test_breakdown_totals_match_summary_and_percentages_sum_to_100():
    start = date(2024, 5, 1)
    wps = [CAFE, DEPO, OFIS]
    wages = [500, 800, 300, 650, 420, 275, 990]
    rows = [_day(start + timedelta(days=i), wps[i % 3], wages[i % len(wages)], i) for i in range(25)]

    report = compute_monthly_stats(rows, 5, 2024)

    assert sum(b.total_days for b in report.workplace_breakdown) == report.summary.total_work_days
    assert abs(sum(b.total_earnings for b in report.workplace_breakdown) - report.summary.total_earnings) < 1e-6
    assert abs(sum(b.percentage for b in report.workplace_breakdown) - 100) <= len(report.workplace_breakdown)
    earnings = [b.total_earnings for b in report.workplace_breakdown]
    assert earnings == sorted(earnings, reverse=True)


def test_zero_wages_give_zero_percentages():
    rows = [_day(date(2024, 3, 1), CAFE, 0), _day(date(2024, 3, 2), DEPO, 0)]

    report = compute_monthly_stats(rows, 3, 2024)

    assert [b.percentage for b in report.workplace_breakdown] == [0, 0]
    assert report.summary.average_daily_earning == 0
    # Ties resolve to the first workplace seen in the input.
    assert report.highest_earning_workplace.workplace_id == CAFE.workplace_id


def test_ties_keep_encounter_order():
    rows = [
        _day(date(2024, 3, 3), DEPO, 500),
        _day(date(2024, 3, 2), CAFE, 500),
        _day(date(2024, 3, 1), OFIS, 900),
    ]

    report = compute_monthly_stats(rows, 3, 2024)

    assert [b.workplace_id for b in report.workplace_breakdown] == [3, 2, 1]
    assert report.most_worked_workplace.workplace_id == DEPO.workplace_id
    assert report.highest_earning_workplace.workplace_id == OFIS.workplace_id


def test_weekly_distribution_uses_sunday_as_one():
    rows = [
        _day(date(2024, 3, 3), CAFE, 500),  # Sunday
        _day(date(2024, 3, 10), CAFE, 500),  # Sunday
        _day(date(2024, 3, 4), DEPO, 800),  # Monday
        _day(date(2024, 3, 9), DEPO, 800),  # Saturday
    ]

    report = compute_monthly_stats(rows, 3, 2024)

    assert [(d.day_number, d.day_name, d.count, d.total_earnings) for d in report.weekly_distribution] == [
        (1, "Pazar", 2, 1000),
        (2, "Pazartesi", 1, 800),
        (7, "Cumartesi", 1, 800),
    ]


def test_snapshot_wage_is_used_not_workplace_wage():
    rows = [_day(date(2024, 3, 5), CAFE, 750)]

    report = compute_monthly_stats(rows, 3, 2024)

    entry = report.workplace_breakdown[0]
    assert entry.total_earnings == 750
    assert entry.default_wage == 500


def test_to_dict_uses_plain_numbers_and_camel_case_keys():
    report = compute_monthly_stats([_day(date(2024, 3, 5), CAFE, 500)], 3, 2024)

    data = report.to_dict()

    assert data["summary"] == {
        "totalEarnings": 500,
        "totalWorkDays": 1,
        "averageDailyEarning": 500,
        "workplaceCount": 1,
    }
    assert data["workplaceBreakdown"][0]["percentage"] == 100
    assert data["insights"]["mostWorkedWorkplace"]["name"] == "Kafe"
