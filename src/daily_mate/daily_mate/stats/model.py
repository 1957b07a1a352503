from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Period:
    month: int
    year: int
    month_name: str


@dataclass(frozen=True)
class Summary:
    total_earnings: float
    total_work_days: int
    average_daily_earning: float
    workplace_count: int


@dataclass(frozen=True)
class WorkplaceInsight:
    workplace_id: int
    name: str
    color: str
    days: int
    earnings: float

    def to_dict(self) -> dict:
        return {
            "workplaceId": self.workplace_id,
            "name": self.name,
            "color": self.color,
            "days": self.days,
            "earnings": self.earnings,
        }


@dataclass(frozen=True)
class WorkplaceBreakdown:
    workplace_id: int
    name: str
    color: str
    default_wage: float
    total_days: int
    total_earnings: float
    average_wage: float
    percentage: int


@dataclass(frozen=True)
class WeekdayTotal:
    day_number: int  # 1=Sunday ... 7=Saturday
    day_name: str
    count: int
    total_earnings: float


@dataclass(frozen=True)
class StatsReport:
    """Monthly earnings report; plain numbers only, formatting is up to the UI."""

    period: Period
    summary: Summary
    most_worked_workplace: Optional[WorkplaceInsight] = None
    highest_earning_workplace: Optional[WorkplaceInsight] = None
    workplace_breakdown: list[WorkplaceBreakdown] = field(default_factory=list)
    weekly_distribution: list[WeekdayTotal] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "period": {
                "month": self.period.month,
                "year": self.period.year,
                "monthName": self.period.month_name,
            },
            "summary": {
                "totalEarnings": self.summary.total_earnings,
                "totalWorkDays": self.summary.total_work_days,
                "averageDailyEarning": self.summary.average_daily_earning,
                "workplaceCount": self.summary.workplace_count,
            },
            "insights": {
                "mostWorkedWorkplace": (
                    self.most_worked_workplace.to_dict() if self.most_worked_workplace else None
                ),
                "highestEarningWorkplace": (
                    self.highest_earning_workplace.to_dict() if self.highest_earning_workplace else None
                ),
            },
            "workplaceBreakdown": [
                {
                    "workplaceId": b.workplace_id,
                    "name": b.name,
                    "color": b.color,
                    "defaultWage": b.default_wage,
                    "totalDays": b.total_days,
                    "totalEarnings": b.total_earnings,
                    "averageWage": b.average_wage,
                    "percentage": b.percentage,
                }
                for b in self.workplace_breakdown
            ],
            "weeklyDistribution": [
                {
                    "dayNumber": d.day_number,
                    "dayName": d.day_name,
                    "count": d.count,
                    "totalEarnings": d.total_earnings,
                }
                for d in self.weekly_distribution
            ],
        }
