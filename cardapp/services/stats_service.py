# File: cardapp/services/stats_service.py

"""
Per-user card statistics.

One owner-filtered read of the card store produces the snapshot; every
statistic ("facet") is an independent reduction over that same list, so
all numbers in a report describe the same point in time. The raw facet
results are merged into the response by ``stats_report.shape_report``.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from cardapp.models.card import Card
from cardapp.schemas.stats import StatsReport
from cardapp.services.auth_service import get_user
from cardapp.services.card_service import query_cards
from cardapp.services.stats_report import shape_report

logger = logging.getLogger(__name__)

SHORT_WINDOW = timedelta(days=7)
LONG_WINDOW = timedelta(days=30)


@dataclass(frozen=True)
class CardSnapshot:
    title: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_card(cls, card: Card) -> "CardSnapshot":
        return cls(
            title=card.title,
            status=card.status,
            created_at=as_utc(card.created_at),
            updated_at=as_utc(card.updated_at),
        )


@dataclass(frozen=True)
class Windows:
    now: datetime
    last_7_days: datetime
    last_30_days: datetime

    @classmethod
    def ending_at(cls, now: datetime) -> "Windows":
        return cls(now=now, last_7_days=now - SHORT_WINDOW, last_30_days=now - LONG_WINDOW)


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ---------------------------------------------------------------------------
# Facets
# ---------------------------------------------------------------------------

def count_total(cards: Sequence[CardSnapshot]) -> int:
    return len(cards)


def count_by_status(cards: Iterable[CardSnapshot]) -> Dict[str, int]:
    """Counts for the statuses present in ``cards`` only; absent ones are filled later."""
    return dict(Counter(card.status for card in cards))


def count_projects(cards: Iterable[CardSnapshot]) -> int:
    return len({card.title for card in cards})


def count_created_since(cards: Iterable[CardSnapshot], since: datetime) -> int:
    return sum(1 for card in cards if card.created_at >= since)


def completed_since(cards: Iterable[CardSnapshot], since: datetime) -> List[CardSnapshot]:
    # updated_at of a done card is taken as its completion time
    return [card for card in cards if card.status == "done" and card.updated_at >= since]


def count_completed_since(cards: Iterable[CardSnapshot], since: datetime) -> int:
    return len(completed_since(cards, since))


def average_daily_completions(cards: Iterable[CardSnapshot], since: datetime) -> Optional[float]:
    """
    Average completions per calendar day (UTC date of ``updated_at``),
    taken over the days that had at least one completion.

    Returns None when nothing was completed in the window.
    """
    per_day = Counter(card.updated_at.date().isoformat() for card in completed_since(cards, since))
    if not per_day:
        return None
    return sum(per_day.values()) / len(per_day)


def most_active_project(cards: Iterable[CardSnapshot], since: datetime) -> Optional[Tuple[str, int]]:
    """
    Title with the most cards created since ``since``, with its count.

    Ties go to the lexicographically smallest title.
    """
    per_title = Counter(card.title for card in cards if card.created_at >= since)
    if not per_title:
        return None
    return min(per_title.items(), key=lambda item: (-item[1], item[0]))


FacetFn = Callable[[Sequence[CardSnapshot], Windows], Any]

FACETS: Dict[str, FacetFn] = {
    "total_cards": lambda cards, w: count_total(cards),
    "total_status": lambda cards, w: count_by_status(cards),
    "total_projects": lambda cards, w: count_projects(cards),
    "cards_created_last_7_days": lambda cards, w: count_created_since(cards, w.last_7_days),
    "cards_completed_last_7_days": lambda cards, w: count_completed_since(cards, w.last_7_days),
    "cards_completed_last_30_days": lambda cards, w: average_daily_completions(cards, w.last_30_days),
    "most_active_project_last_30_days": lambda cards, w: most_active_project(cards, w.last_30_days),
}


def run_facets(cards: Sequence[CardSnapshot], now: datetime) -> Dict[str, Any]:
    """Apply every facet to the same snapshot."""
    windows = Windows.ending_at(now)
    return {name: facet(cards, windows) for name, facet in FACETS.items()}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def compute_stats(db: Session, user_id: str, now: Optional[datetime] = None) -> StatsReport:
    """
    Build the statistics report for ``user_id`` as of ``now``.

    Raises MalformedInput for a bad id, UserNotFound for an unknown user
    and StoreUnavailable when the store cannot be read. A user without
    cards gets a zero-filled report.
    """
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)

    user = get_user(db, user_id)
    snapshot = [CardSnapshot.from_card(card) for card in query_cards(db, user.id)]
    logger.debug("Computing stats for user %s over %d cards", user.id, len(snapshot))

    facets = run_facets(snapshot, now)
    return shape_report(facets, user, now)
