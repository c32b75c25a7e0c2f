import logging
from typing import Dict, Iterable, List

from dinner.domain.Recipe import Recipe
from dinner.infra.json_store import read_json_file
from dinner.infra import paths

logger = logging.getLogger(__name__)


def load_catalog() -> Dict:
    """Raw catalog document ({"recipes": [...]})."""
    data = read_json_file(paths.RECIPES_FILE, {"recipes": []})
    if not isinstance(data, dict) or not isinstance(data.get("recipes"), list):
        logger.warning(f"Recipes file has no recipe list: {paths.RECIPES_FILE}. Returning empty catalog.")
        return {"recipes": []}
    return data


def load_recipes() -> List[Recipe]:
    """Read recipes from the catalog with proper error handling."""
    recipes = []
    for entry in load_catalog()["recipes"]:
        if not isinstance(entry, dict):
            continue
        recipes.append(Recipe.from_dict(entry))
    return recipes


def find_recipes(recipe_ids: Iterable[str], recipes: List[Recipe] = None) -> List[Recipe]:
    """Resolve ids in the given order; unknown ids are skipped."""
    if recipes is None:
        recipes = load_recipes()
    index = {r.id: r for r in recipes}
    found = []
    for rid in recipe_ids:
        recipe = index.get(str(rid))
        if recipe is None:
            logger.warning(f"Unknown recipe id in selection: {rid}")
            continue
        found.append(recipe)
    return found


def recipes_by_category(recipes: List[Recipe] = None) -> Dict[str, List[str]]:
    """Recipe names grouped by category, categories in alphabetical order."""
    if recipes is None:
        recipes = load_recipes()
    groups: Dict[str, List[str]] = {}
    for r in recipes:
        groups.setdefault(r.category, []).append(r.name)
    return {c: groups[c] for c in sorted(groups)}
