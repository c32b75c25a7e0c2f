import logging
from fastapi import APIRouter, HTTPException, Body

from dinner.events.event_helpers import publish_plan_saved
from dinner.infra.Plan_Repository import PlanRepository
from dinner.infra.Recipe_Repository import load_recipes
from dinner.utilities.validators import RecipeSelectionInput

router = APIRouter(prefix="/api/plans")
logger = logging.getLogger(__name__)


@router.get("")
def get_plans():
    return PlanRepository().load_document()


@router.post("")
def save_plans(payload: dict = Body(...)):
    plans = payload.get("plans")
    if not isinstance(plans, list):
        raise HTTPException(status_code=400, detail="Invalid data: plans must be an array")
    if not PlanRepository().save_plans(plans):
        raise HTTPException(status_code=500, detail="Failed to save weekly plans")
    logger.info("Weekly plans saved count=%s", len(plans))
    return {"success": True, "message": "Weekly plans saved", "count": len(plans)}


@router.put("/current")
def save_current_plan(payload: RecipeSelectionInput):
    """Store the selection as this ISO week's plan (created or updated in place)."""
    try:
        plan = PlanRepository().save_current_week(payload.recipeIds)
    except OSError as e:
        logger.error("Failed to save current plan: %s", e)
        raise HTTPException(status_code=500, detail="Failed to save weekly plan")
    publish_plan_saved(plan)
    return {"success": True, "plan": plan.to_dict()}


@router.get("/history")
def plan_history():
    return {"plans": PlanRepository().history(load_recipes())}


@router.get("/{plan_id}")
def get_plan(plan_id: int):
    """Plan plus its recipes in stored order, for loading back into the planner."""
    repo = PlanRepository()
    plan = repo.get_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    recipes = repo.resolve_recipes(plan, load_recipes())
    return {"plan": plan.to_dict(), "recipes": [r.to_dict() for r in recipes]}
