"""Example: the stats and calendar engine used without Flask or a database."""

from datetime import date

from src.daily_mate.daily_mate.calendar_grid.projector import build_month_grid, index_by_date
from src.daily_mate.daily_mate.stats.aggregator import compute_monthly_stats
from src.daily_mate.daily_mate.workdays.model import WorkDayView, WorkplaceRef


def main():
    cafe = WorkplaceRef(workplace_id=1, name="Kafe", color="#3B82F6", daily_wage=500)
    depo = WorkplaceRef(workplace_id=2, name="Depo", color="#10B981", daily_wage=800)
    days = [
        WorkDayView(work_day_id=3, work_date=date(2024, 3, 10), wage_on_that_day=800, workplace=depo),
        WorkDayView(work_day_id=2, work_date=date(2024, 3, 6), wage_on_that_day=500, workplace=cafe),
        WorkDayView(work_day_id=1, work_date=date(2024, 3, 5), wage_on_that_day=500, workplace=cafe),
    ]

    print(compute_monthly_stats(days, 3, 2024).to_dict())

    grid = build_month_grid(2024, 3, index_by_date(days), date(2024, 3, 15))
    for week in range(6):
        row = grid[week * 7:(week + 1) * 7]
        print(" ".join(("*" if c.has_work else " ") + f"{c.day.day:2d}" for c in row))


if __name__ == "__main__":
    main()
