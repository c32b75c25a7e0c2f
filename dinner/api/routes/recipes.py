from fastapi import APIRouter
from dinner.infra.Recipe_Repository import load_catalog, load_recipes, recipes_by_category
from dinner.infra.Rating_Repository import load_members

router = APIRouter()


@router.get("/api/recipes")
def list_recipes():
    """Return the recipe catalog document as stored."""
    return load_catalog()


@router.get("/api/recipes/by-category")
def list_recipes_by_category():
    """Recipe names grouped by category (rating dropdown)."""
    return {"categories": recipes_by_category(load_recipes())}


@router.get("/api/members")
def list_members():
    return load_members()
