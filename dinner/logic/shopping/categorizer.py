"""Keyword based grocery categorization.

Rules are checked in list order and the first category with a keyword
contained in the lower-cased item name wins. "pepper" and "basil" appear in
both Produce and Spices & Seasonings; Produce is checked first, so they land
there. Spices & Seasonings is checked before Pantry.
"""
from typing import Iterable, List, Tuple

from dinner.domain.ShoppingList import AggregatedLine, CategorizedList, GroceryCategory

CATEGORY_RULES: List[Tuple[GroceryCategory, Tuple[str, ...]]] = [
    (GroceryCategory.PRODUCE, (
        'onion', 'garlic', 'tomato', 'spinach', 'kale', 'pepper', 'vegetable',
        'carrot', 'broccoli', 'basil', 'lemon', 'shallot',
    )),
    (GroceryCategory.MEAT_POULTRY, ('chicken', 'beef', 'sausage', 'steak')),
    (GroceryCategory.DAIRY_EGGS, (
        'cream', 'cheese', 'butter', 'ricotta', 'mozzarella', 'parmesan', 'milk',
    )),
    (GroceryCategory.SPICES_SEASONINGS, (
        'salt', 'pepper', 'seasoning', 'paprika', 'basil', 'oregano', 'flakes', 'bouillon',
    )),
    (GroceryCategory.PANTRY, (
        'pasta', 'rice', 'flour', 'oil', 'sauce', 'broth', 'stock', 'vinegar',
        'mustard', 'bourbon', 'wine', 'tortellini', 'ravioli', 'honey',
    )),
]


def classify_item(item: str) -> GroceryCategory:
    item_lower = (item or '').lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in item_lower for keyword in keywords):
            return category
    return GroceryCategory.OTHER


def categorize(lines: Iterable[AggregatedLine]) -> CategorizedList:
    """Place each line into exactly one bucket, keeping arrival order per bucket."""
    result = CategorizedList()
    for line in lines:
        result.add(classify_item(line.item), line)
    return result


__all__ = ['CATEGORY_RULES', 'classify_item', 'categorize']
