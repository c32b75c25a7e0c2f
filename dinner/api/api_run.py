from fastapi import (
    FastAPI,
    Request,
    Query,
    HTTPException,
    Response,
)
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from datetime import datetime
from typing import List, Optional
import logging

from dinner.infra.pdf_utils import generate_pdf_for_shopping_list
from dinner.infra.Plan_Repository import PlanRepository
from dinner.infra.Recipe_Repository import find_recipes, load_recipes
from dinner.logic.shopping.list_builder import build_shopping_list
from dinner.logic.shopping.formatting import format_amount, format_line, serialize_shopping_list
from dinner.events.event_helpers import publish_plan_saved, publish_shopping_list_generated
from dinner.events.web_observers import start as start_event_observers, get_events as get_web_events
from dinner.utilities.config import STATIC_DIR, TEMPLATES_DIR
from dinner.utilities.validators import RecipeSelectionInput

# Routers
from dinner.api.routes import plans, ratings, recipes as recipe_routes, uploads
from dinner.api.api_extract import router as extract_router

# Logging
logger = logging.getLogger("dinner_app")

# Initialize FastAPI app
app = FastAPI(title="Dinner Time Meal Planner API")

# Include routers
app.include_router(recipe_routes.router)
app.include_router(plans.router)
app.include_router(ratings.router)
app.include_router(uploads.router)
app.include_router(extract_router)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["amount"] = format_amount
templates.env.filters["line"] = format_line


@app.on_event("startup")
def _startup():
    """Create upload folders and register activity observers."""
    uploads.ensure_upload_dirs()
    start_event_observers()


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


def _generate(recipe_ids: List[str]):
    selected = find_recipes(recipe_ids)
    shopping_list = build_shopping_list(selected)
    publish_shopping_list_generated([r.name for r in selected], len(shopping_list))
    return selected, shopping_list


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def planner_page(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"recipes": load_recipes(), "time": _ts()},
    )


@app.get("/shopping-list", response_class=HTMLResponse)
def shopping_list_page(request: Request, ids: List[str] = Query(default=[])):
    selected, shopping_list = _generate(ids) if ids else ([], None)
    return templates.TemplateResponse(
        request,
        "shopping_list.html",
        {
            "recipes": selected,
            "categories": shopping_list.non_empty() if shopping_list else [],
            "total_items": len(shopping_list) if shopping_list else 0,
            "time": _ts(),
        },
    )


# -------------------- API: Shopping List (JSON / PDF) --------------------
@app.post('/api/shopping-list')
def api_shopping_list(payload: RecipeSelectionInput):
    if not payload.recipeIds:
        raise HTTPException(status_code=400, detail="Please select at least one recipe")
    if payload.savePlan:
        try:
            plan = PlanRepository().save_current_week(payload.recipeIds)
        except OSError as e:
            logger.error("Failed to save weekly plan: %s", e)
            raise HTTPException(status_code=500, detail="Failed to save weekly plan")
        publish_plan_saved(plan)
    selected, shopping_list = _generate(payload.recipeIds)
    logger.info("Shopping list for %d recipes: %d lines", len(selected), len(shopping_list))
    return {
        "recipes": [{"name": r.name, "servings": r.servings} for r in selected],
        "categories": serialize_shopping_list(shopping_list),
        "count": len(shopping_list),
    }


@app.get('/api/shopping-list/pdf')
def api_shopping_list_pdf(ids: List[str] = Query(default=[])):
    if not ids:
        raise HTTPException(status_code=400, detail="Please select at least one recipe")
    selected, shopping_list = _generate(ids)
    pdf_bytes = generate_pdf_for_shopping_list(shopping_list, selected)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="shopping_list.pdf"'},
    )


# -------------------- API: Activity events --------------------
@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)
