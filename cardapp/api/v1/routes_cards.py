# File: cardapp/api/v1/routes_cards.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from cardapp.api.deps import get_current_user, get_db, require_admin
from cardapp.models.user import User
from cardapp.schemas.card import CardCreate, CardRead, CardUpdate
from cardapp.schemas.stats import StatsReport
from cardapp.services import card_service
from cardapp.services.stats_service import compute_stats

router = APIRouter()


@router.get("/", response_model=list[CardRead], summary="List the caller's cards")
def list_cards(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return card_service.query_cards(db, user.id)


# Registered before /{card_id} so "stats" is not read as an id
@router.get("/stats", response_model=StatsReport, summary="Statistics over the caller's cards")
def card_stats(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return compute_stats(db, user.id)


@router.get("/{card_id}", response_model=CardRead, summary="Get one card")
def get_card(
    card_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return card_service.get_card(db, user.id, card_id)


@router.post(
    "/",
    response_model=CardRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a card",
)
def create_card(
    payload: CardCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return card_service.create_card(db, user.id, payload.model_dump())


@router.put("/{card_id}", response_model=CardRead, summary="Update a card")
def update_card(
    card_id: str,
    payload: CardUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return card_service.update_card(db, user.id, card_id, payload.model_dump(exclude_unset=True))


@router.delete("/{card_id}", summary="Delete a card (admin only)")
def delete_card(
    card_id: str,
    _: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    card_service.delete_card(db, card_id)
    return {"message": "Card deleted successfully"}
