"""Typed shortcuts for publishing activity events on the global bus."""
from __future__ import annotations
from typing import Iterable

from dinner.domain.Plan import WeeklyPlan
from dinner.domain.Rating import Rating
from .Event_Bus import PLAN_SAVED, RATING_ADDED, SHOPPING_LIST_GENERATED, publish_event


def publish_plan_saved(plan: WeeklyPlan):
    publish_event(PLAN_SAVED, {'plan': plan})


def publish_rating_added(rating: Rating):
    publish_event(RATING_ADDED, {'rating': rating})


def publish_shopping_list_generated(recipe_names: Iterable[str], count: int):
    """``count`` is the number of merged shopping list lines."""
    publish_event(SHOPPING_LIST_GENERATED, {'recipes': list(recipe_names), 'count': count})


__all__ = ['publish_plan_saved', 'publish_rating_added', 'publish_shopping_list_generated']
