import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Body, Query
from pydantic import ValidationError

from dinner.domain.Rating import Rating
from dinner.events.event_helpers import publish_rating_added
from dinner.infra.Rating_Repository import add_rating, load_ratings, load_ratings_document, save_ratings
from dinner.logic.reporting.favorites import dashboard
from dinner.utilities.validators import RatingInput

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/ratings")
def get_ratings():
    return load_ratings_document()


@router.post("/api/ratings")
def replace_ratings(payload: dict = Body(...)):
    ratings = payload.get("ratings")
    if not isinstance(ratings, list):
        raise HTTPException(status_code=400, detail="Invalid data: ratings must be an array")
    if not save_ratings(ratings):
        raise HTTPException(status_code=500, detail="Failed to save ratings")
    return {"success": True, "message": "Ratings saved", "count": len(ratings)}


@router.post("/api/ratings/add")
def add_single_rating(payload: dict = Body(...)):
    if not payload.get("user") or not payload.get("recipe") or not payload.get("score"):
        raise HTTPException(status_code=400, detail="Invalid rating: requires user, recipe, and score")
    try:
        data = RatingInput(**payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid rating: {e.errors()[0]['msg']}")
    rating = Rating(data.user, data.recipe, data.score, data.date or "", data.dateFormatted or "")
    if not add_rating(rating):
        raise HTTPException(status_code=500, detail="Failed to save rating")
    publish_rating_added(rating)
    return {"success": True, "message": "Rating added", "rating": rating.to_dict()}


@router.get("/api/dashboard")
def get_dashboard(person: Optional[str] = Query(default=None)):
    """Overall favorites, one member's favorites and the rating history."""
    return dashboard(load_ratings(), person)
