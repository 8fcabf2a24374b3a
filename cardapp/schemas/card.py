# File: cardapp/schemas/card.py

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CardStatus = Literal["todo", "doing", "done"]


class CardBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    due_date: Optional[datetime] = None


class CardCreate(CardBase):
    status: CardStatus = "todo"


class CardUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    status: Optional[CardStatus] = None
    due_date: Optional[datetime] = None

    @field_validator("title", "description", "status")
    @classmethod
    def reject_null(cls, v):
        # dueDate may be cleared with null, the other columns are NOT NULL
        if v is None:
            raise ValueError("may not be null")
        return v


class CardRead(CardBase):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    status: CardStatus
    owner_id: str
    created_at: datetime
    updated_at: datetime


class CardOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str


class AdminCardRead(CardRead):
    owner: CardOwner
