"""Shopping list builder.

Merges the ingredients of the selected recipes into one line per item name
(case-insensitive) and hands the merged lines to the categorizer.
Provides aggregate_ingredients(recipes) and build_shopping_list(recipes).
"""
import logging
from typing import Dict, Iterable, List

from dinner.domain.Ingredient import Ingredient
from dinner.domain.Recipe import Recipe
from dinner.domain.ShoppingList import AggregatedLine, CategorizedList
from dinner.logic.shopping.categorizer import categorize
from dinner.utilities.numbers import format_number, parse_amount

logger = logging.getLogger(__name__)


def _key(name: str) -> str:
    return (name or '').lower()


def _merge(line: AggregatedLine, ing: Ingredient, recipe_name: str) -> None:
    if line.unit == ing.unit:
        current = None if line.unit_cleared else parse_amount(line.amount)
        extra = parse_amount(ing.amount)
        if current is not None and extra is not None:
            line.amount = format_number(current + extra)
        else:
            line.amount = f"{line.amount} + {ing.amount}"
    else:
        line.amount = f"{line.amount} {line.unit} + {ing.amount} {ing.unit}"
        line.unit = ""
        # permanent for this run: no numeric merge on this line from now on
        line.unit_cleared = True
    line.add_recipe(recipe_name)


def aggregate_ingredients(recipes: Iterable[Recipe]) -> Dict[str, AggregatedLine]:
    """Fold every ingredient of every recipe into one line per lower-cased item name.

    Args:
        recipes: Selected recipes, in selection order.

    Returns:
        Dict keyed by normalized item name, in first-seen order.
    """
    lines: Dict[str, AggregatedLine] = {}
    count = 0
    for recipe in recipes:
        count += 1
        for ing in recipe.ingredients or []:
            if not ing.item:
                continue
            k = _key(ing.item)
            line = lines.get(k)
            if line is None:
                lines[k] = AggregatedLine(
                    key=k,
                    item=ing.item,
                    amount=ing.amount,
                    unit=ing.unit,
                    additional=ing.additional or "",
                    recipes=[recipe.name],
                )
            else:
                _merge(line, ing, recipe.name)
    logger.debug("Aggregated %d recipes into %d shopping lines", count, len(lines))
    return lines


def build_shopping_list(recipes: List[Recipe]) -> CategorizedList:
    """Aggregate then categorize the selected recipes' ingredients."""
    return categorize(aggregate_ingredients(recipes).values())


__all__ = ['aggregate_ingredients', 'build_shopping_list', 'parse_amount', 'format_number']
