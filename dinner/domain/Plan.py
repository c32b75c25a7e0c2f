"""WeeklyPlan domain entity: recipes selected for one ISO week."""
from datetime import date, datetime, timezone
from typing import List, Optional


def iso_week_key(day: Optional[date] = None) -> dict:
    """Return {'year', 'week', 'isoWeek'} for the ISO week containing ``day`` (default today)."""
    iso = (day or date.today()).isocalendar()
    return {"year": iso[0], "week": iso[1], "isoWeek": f"{iso[0]}-W{iso[1]:02d}"}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class WeeklyPlan:
    def __init__(self, plan_id: int, iso_week: str, year: int, week: int,
                 recipe_ids: Optional[List[str]] = None, created_at: str = "", updated_at: str = ""):
        self.plan_id = plan_id
        self.iso_week = iso_week
        self.year = year
        self.week = week
        self.recipe_ids = recipe_ids[:] if recipe_ids else []
        self.created_at = created_at or _now_iso()
        self.updated_at = updated_at or self.created_at

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return WeeklyPlan(
            plan_id=d.get("planId", 0),
            iso_week=d.get("isoWeek", ""),
            year=d.get("year", 0),
            week=d.get("week", 0),
            recipe_ids=[str(r) for r in d.get("recipeIds") or [] if r is not None],
            created_at=d.get("createdAt", ""),
            updated_at=d.get("updatedAt", ""),
        )

    def to_dict(self):
        return {
            "planId": self.plan_id,
            "isoWeek": self.iso_week,
            "year": self.year,
            "week": self.week,
            "recipeIds": list(self.recipe_ids),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def __str__(self) -> str:
        return f"Plan {self.iso_week} - {len(self.recipe_ids)} recipes"

    __repr__ = __str__
