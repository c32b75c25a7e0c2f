"""In-process publish/subscribe for household activity.

Topics:
  plan.saved               {"plan": WeeklyPlan}
  rating.added             {"rating": Rating}
  shopping_list.generated  {"recipes": [names], "count": int}

Listeners are called as listener(topic, payload), in subscription order.
"""
from __future__ import annotations
import logging
from threading import RLock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]

PLAN_SAVED = "plan.saved"
RATING_ADDED = "rating.added"
SHOPPING_LIST_GENERATED = "shopping_list.generated"


class EventBus:
	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = {}
		# sync routes run in the threadpool
		self._guard = RLock()

	def subscribe(self, topic: str, listener: Listener) -> Listener:
		with self._guard:
			listeners = self._listeners.setdefault(topic, [])
			if listener not in listeners:
				listeners.append(listener)
		return listener

	def unsubscribe(self, topic: str, listener: Listener) -> bool:
		with self._guard:
			listeners = self._listeners.get(topic, [])
			if listener in listeners:
				listeners.remove(listener)
				return True
		return False

	def listeners(self, topic: str) -> List[Listener]:
		with self._guard:
			return list(self._listeners.get(topic, []))

	def publish(self, topic: str, payload: Any = None) -> int:
		"""Deliver to every listener of ``topic``; returns how many succeeded."""
		delivered = 0
		for listener in self.listeners(topic):
			try:
				listener(topic, payload)
			except Exception:
				logger.exception("Listener %r failed on %s", listener, topic)
				continue
			delivered += 1
		return delivered


GLOBAL_EVENT_BUS = EventBus()


def publish_event(topic: str, payload: Any = None) -> int:
	return GLOBAL_EVENT_BUS.publish(topic, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event',
	'PLAN_SAVED', 'RATING_ADDED', 'SHOPPING_LIST_GENERATED',
]
