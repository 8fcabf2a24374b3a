# File: cardapp/services/card_service.py

"""
Card store access.

Every read and write here is scoped by owner; the only unscoped read is
``list_all_cards`` which backs the owner-only admin listing.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from cardapp.core.errors import CardNotFound
from cardapp.models.base import utcnow
from cardapp.models.card import Card
from cardapp.services.common import store_errors, validate_id

logger = logging.getLogger(__name__)


def query_cards(db: Session, owner_id: str) -> list[Card]:
    """All cards owned by ``owner_id`` in one read, newest first."""
    stmt = (
        select(Card)
        .where(Card.owner_id == owner_id)
        .order_by(Card.created_at.desc())
    )
    with store_errors("card query"):
        return list(db.scalars(stmt))


def get_card(db: Session, owner_id: str, card_id: str) -> Card:
    card_id = validate_id(card_id, "card id")
    with store_errors("card lookup"):
        card = db.scalar(
            select(Card).where(Card.id == card_id, Card.owner_id == owner_id)
        )
    if card is None:
        raise CardNotFound()
    return card


def create_card(db: Session, owner_id: str, data: dict[str, Any]) -> Card:
    card = Card(owner_id=owner_id, **data)
    with store_errors("card create"):
        db.add(card)
        db.commit()
        db.refresh(card)
    logger.info("Card %s created for user %s", card.id, owner_id)
    return card


def update_card(db: Session, owner_id: str, card_id: str, changes: dict[str, Any]) -> Card:
    card = get_card(db, owner_id, card_id)
    for field, value in changes.items():
        setattr(card, field, value)
    # Refresh even when the values are unchanged
    card.updated_at = utcnow()
    with store_errors("card update"):
        db.commit()
        db.refresh(card)
    logger.info("Card %s updated (%s)", card.id, ", ".join(sorted(changes)) or "no fields")
    return card


def delete_card(db: Session, card_id: str) -> None:
    """Delete any card by id. Only reachable through the admin-gated route."""
    card_id = validate_id(card_id, "card id")
    with store_errors("card lookup"):
        card = db.get(Card, card_id)
    if card is None:
        raise CardNotFound()
    with store_errors("card delete"):
        db.delete(card)
        db.commit()
    logger.info("Card %s deleted", card_id)


def list_all_cards(db: Session) -> list[Card]:
    stmt = select(Card).options(joinedload(Card.owner)).order_by(Card.created_at.desc())
    with store_errors("card listing"):
        return list(db.scalars(stmt))
