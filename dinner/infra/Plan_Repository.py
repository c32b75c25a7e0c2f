import time
from datetime import date, datetime, timezone
from typing import List, Optional

from dinner.domain.Plan import WeeklyPlan, iso_week_key
from dinner.domain.Recipe import Recipe
from dinner.infra.json_store import read_json_file, write_json_file
from dinner.infra import paths
from dinner.utilities.constants import METADATA_VERSION, PLANS_DESCRIPTION


def _metadata() -> dict:
    return {
        "version": METADATA_VERSION,
        "lastUpdated": datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
        "description": PLANS_DESCRIPTION,
    }


class PlanRepository:
    def load_document(self) -> dict:
        data = read_json_file(paths.WEEKLY_PLANS_FILE, {"plans": [], "metadata": {}})
        if not isinstance(data, dict):
            return {"plans": [], "metadata": {}}
        data.setdefault("plans", [])
        data.setdefault("metadata", {})
        return data

    def get_plans(self) -> List[WeeklyPlan]:
        return [WeeklyPlan.from_dict(p) for p in self.load_document()["plans"] if isinstance(p, dict)]

    def save_plans(self, plans: list) -> bool:
        """Replace every stored plan (raw dicts or WeeklyPlan objects)."""
        raw = [p.to_dict() if isinstance(p, WeeklyPlan) else p for p in plans]
        return write_json_file(paths.WEEKLY_PLANS_FILE, {"plans": raw, "metadata": _metadata()})

    def get_plan(self, plan_id: int) -> Optional[WeeklyPlan]:
        for plan in self.get_plans():
            if plan.plan_id == plan_id:
                return plan
        return None

    def save_current_week(self, recipe_ids: List[str], today: Optional[date] = None) -> WeeklyPlan:
        """Create or update the plan of the ISO week containing ``today``.

        An existing plan for that week keeps its planId and createdAt.
        """
        info = iso_week_key(today)
        plans = self.get_plans()
        existing = next((p for p in plans if p.iso_week == info["isoWeek"]), None)
        plan = WeeklyPlan(
            plan_id=existing.plan_id if existing else int(time.time() * 1000),
            iso_week=info["isoWeek"],
            year=info["year"],
            week=info["week"],
            recipe_ids=[str(r) for r in recipe_ids],
            created_at=existing.created_at if existing else "",
        )
        plan.updated_at = _metadata()["lastUpdated"]
        if existing:
            plans[plans.index(existing)] = plan
        else:
            plans.append(plan)
        if not self.save_plans(plans):
            raise OSError(f"Failed to save weekly plans to {paths.WEEKLY_PLANS_FILE}")
        return plan

    @staticmethod
    def resolve_recipes(plan: WeeklyPlan, recipes: List[Recipe]) -> List[Recipe]:
        index = {r.id: r for r in recipes}
        return [index[rid] for rid in plan.recipe_ids if rid in index]

    def history(self, recipes: List[Recipe]) -> List[dict]:
        """Plans newest week first, each with its resolved recipe summaries."""
        result = []
        for plan in sorted(self.get_plans(), key=lambda p: p.iso_week, reverse=True):
            entry = plan.to_dict()
            entry["recipes"] = [r.summary() for r in self.resolve_recipes(plan, recipes)]
            result.append(entry)
        return result
