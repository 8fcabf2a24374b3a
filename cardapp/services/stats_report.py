# File: cardapp/services/stats_report.py

"""
Turns raw facet results into a ``StatsReport``.

A facet that produced no rows arrives as ``None`` (or is missing) and is
replaced by its default: 0 for counts, 0.0 for the daily average, null for
the most active project. ``totalStatus`` always lists todo, doing and done.
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from cardapp.models.card import CARD_STATUSES
from cardapp.models.user import User
from cardapp.schemas.stats import ProjectActivity, ReportUser, StatsReport, StatusCount


def empty_facets() -> Dict[str, Any]:
    """Facet results of a user with no cards. A new dict on every call."""
    return {
        "total_cards": 0,
        "total_status": {},
        "total_projects": 0,
        "cards_created_last_7_days": 0,
        "cards_completed_last_7_days": 0,
        "cards_completed_last_30_days": 0.0,
        "most_active_project_last_30_days": None,
    }


def shape_report(facets: Mapping[str, Any], user: User, generated_at: datetime) -> StatsReport:
    merged = empty_facets()
    merged.update({name: value for name, value in facets.items() if value is not None})

    status_counts: Mapping[str, int] = merged["total_status"]
    most_active: Optional[tuple] = merged["most_active_project_last_30_days"]

    return StatsReport(
        total_cards=merged["total_cards"],
        total_status=[
            StatusCount(status=status, count=status_counts.get(status, 0))
            for status in CARD_STATUSES
        ],
        total_projects=merged["total_projects"],
        cards_created_last_7_days=merged["cards_created_last_7_days"],
        cards_completed_last_7_days=merged["cards_completed_last_7_days"],
        cards_completed_last_30_days=float(merged["cards_completed_last_30_days"]),
        most_active_project_last_30_days=(
            ProjectActivity(name=most_active[0], count=most_active[1]) if most_active else None
        ),
        user=ReportUser(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        ),
        generated_at=generated_at.isoformat(),
    )
