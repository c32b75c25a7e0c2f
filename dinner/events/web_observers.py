"""Recent activity feed for the web UI.

Listens on the global bus and keeps the last MAX_EVENTS events in memory.
Each event carries an increasing integer ``id``; clients poll
GET /api/events?since=<id> and receive only newer ones.
"""
from __future__ import annotations
import logging
from collections import deque
from datetime import datetime, timezone
from itertools import count
from threading import Lock
from typing import Any, Deque, Dict

from .Event_Bus import GLOBAL_EVENT_BUS, PLAN_SAVED, RATING_ADDED, SHOPPING_LIST_GENERATED

logger = logging.getLogger(__name__)

MAX_EVENTS = 300

_lock = Lock()
_feed: Deque[Dict[str, Any]] = deque(maxlen=MAX_EVENTS)
_ids = count(1)
_subscribed = False


def _summarize(payload: Any) -> Dict[str, Any]:
    """Flatten domain objects in a payload into JSON-safe fields."""
    if not isinstance(payload, dict):
        return {}
    summary: Dict[str, Any] = {}
    plan = payload.get('plan')
    if plan is not None:
        summary['isoWeek'] = plan.iso_week
        summary['recipeIds'] = list(plan.recipe_ids)
    rating = payload.get('rating')
    if rating is not None:
        summary.update(user=rating.user, recipe=rating.recipe, score=rating.score)
    if 'recipes' in payload:
        summary['recipes'] = list(payload['recipes'])
    if 'count' in payload:
        summary['count'] = payload['count']
    return summary


def _record(topic: str, payload: Any):
    with _lock:
        event = {
            'id': next(_ids),
            'type': topic,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        event.update(_summarize(payload))
        _feed.append(event)


def start():
    """Subscribe the feed to the global bus (safe to call more than once)."""
    global _subscribed
    with _lock:
        if _subscribed:
            return
        for topic in (PLAN_SAVED, RATING_ADDED, SHOPPING_LIST_GENERATED):
            GLOBAL_EVENT_BUS.subscribe(topic, _record)
        _subscribed = True
    logger.info("Activity feed listening for %s, %s, %s", PLAN_SAVED, RATING_ADDED, SHOPPING_LIST_GENERATED)


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Events with id greater than ``since`` (all when None) and the cursor for the next poll."""
    with _lock:
        events = [e for e in _feed if since is None or e['id'] > since]
        cursor = _feed[-1]['id'] if _feed else (since or 0)
    return {'events': events, 'next_cursor': cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
