"""Rating statistics for the dashboard: overall and per-person favorites."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional


def _one_decimal(value: float) -> float:
    return float(Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def _score(rating: Dict[str, Any]) -> float:
    try:
        return float(rating.get('score') or 0)
    except (TypeError, ValueError):
        return 0.0


def average_rating(ratings: List[Dict[str, Any]], recipe: str) -> float:
    """Average score of ``recipe`` rounded to one decimal (0 when unrated)."""
    scores = [_score(r) for r in ratings if r.get('recipe') == recipe]
    if not scores:
        return 0
    return _one_decimal(sum(scores) / len(scores))


def _recipe_stats(ratings: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    stats = []
    for recipe in dict.fromkeys(r.get('recipe') for r in ratings):
        count = sum(1 for r in ratings if r.get('recipe') == recipe)
        stats.append({'recipe': recipe, 'average': average_rating(ratings, recipe), 'count': count})
    # sorted() is stable: equal averages keep first-rated order
    return sorted(stats, key=lambda s: s['average'], reverse=True)


def overall_favorites(ratings: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return _recipe_stats(ratings)


def person_favorites(ratings: List[Dict[str, Any]], person: str) -> List[Dict[str, Any]]:
    return _recipe_stats([r for r in ratings if r.get('user') == person])


def ratings_history(ratings: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Newest first, by the ISO ``date`` field."""
    return sorted(ratings, key=lambda r: r.get('date') or '', reverse=True)


def dashboard(ratings: List[Dict[str, Any]], person: Optional[str] = None) -> Dict[str, Any]:
    return {
        'overall': overall_favorites(ratings),
        'person': person,
        'person_favorites': person_favorites(ratings, person) if person else [],
        'history': ratings_history(ratings),
        'total': len(ratings),
    }


__all__ = ['average_rating', 'overall_favorites', 'person_favorites', 'ratings_history', 'dashboard']
