# File: cardapp/schemas/stats.py

"""
Response shape of the per-user card statistics report.

Attributes are snake_case in Python and serialized camelCase
(``totalCards``, ``mostActiveProjectLast30Days`` ...).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cardapp.schemas.card import CardStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusCount(_CamelModel):
    status: CardStatus
    count: int


class ProjectActivity(_CamelModel):
    name: str
    count: int


class ReportUser(_CamelModel):
    id: str
    username: str
    email: str
    role: str
    created_at: Optional[datetime] = None


class StatsReport(_CamelModel):
    total_cards: int
    total_status: List[StatusCount]
    total_projects: int
    cards_created_last_7_days: int = Field(alias="cardsCreatedLast7Days")
    cards_completed_last_7_days: int = Field(alias="cardsCompletedLast7Days")
    # Average completions per active day, not per calendar day in the window
    cards_completed_last_30_days: float = Field(alias="cardsCompletedLast30Days")
    most_active_project_last_30_days: Optional[ProjectActivity] = Field(
        default=None, alias="mostActiveProjectLast30Days"
    )
    user: ReportUser
    generated_at: str
