"""Shopping list aggregates: merged ingredient lines and the six category buckets."""
from enum import Enum
from typing import Dict, List, Optional


class GroceryCategory(Enum):
    PRODUCE = "Produce"
    MEAT_POULTRY = "Meat & Poultry"
    DAIRY_EGGS = "Dairy & Eggs"
    PANTRY = "Pantry"
    SPICES_SEASONINGS = "Spices & Seasonings"
    OTHER = "Other"


class AggregatedLine:
    """One deduplicated shopping list row.

    ``amount`` and ``unit`` change as later recipes contribute the same item;
    ``item`` and ``additional`` keep the values of the first occurrence.
    ``unit_cleared`` is set once a unit mismatch has folded the units into
    the amount text.
    """

    def __init__(self, key: str, item: str, amount: str, unit: str, additional: str = "",
                 recipes: Optional[List[str]] = None):
        self.key = key
        self.item = item
        self.amount = amount
        self.unit = unit
        self.additional = additional
        self.recipes = recipes[:] if recipes else []
        self.unit_cleared = False

    def add_recipe(self, name: str):
        if name not in self.recipes:
            self.recipes.append(name)

    def __eq__(self, other):
        if not isinstance(other, AggregatedLine):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.item}: {self.amount} {self.unit}".rstrip() + f" [{', '.join(self.recipes)}]"

    __repr__ = __str__

    def to_dict(self):
        return {
            "key": self.key,
            "item": self.item,
            "amount": self.amount,
            "unit": self.unit,
            "additional": self.additional,
            "recipes": list(self.recipes),
        }


class CategorizedList:
    """Six ordered buckets, always all present (display order = enum order)."""

    def __init__(self):
        self.buckets: Dict[GroceryCategory, List[AggregatedLine]] = {c: [] for c in GroceryCategory}

    def add(self, category: GroceryCategory, line: AggregatedLine):
        self.buckets[category].append(line)

    def __getitem__(self, category) -> List[AggregatedLine]:
        if isinstance(category, str):
            category = GroceryCategory(category)
        return self.buckets[category]

    def __iter__(self):
        return iter(self.buckets.items())

    def __len__(self) -> int:
        return sum(len(lines) for lines in self.buckets.values())

    def non_empty(self):
        '''
        Returns (category, lines) pairs for buckets holding at least one line.
        '''
        return [(c, lines) for c, lines in self.buckets.items() if lines]

    def to_list(self):
        return [
            {"category": c.value, "items": [line.to_dict() for line in lines]}
            for c, lines in self.buckets.items()
        ]

    def __str__(self) -> str:
        parts = [f"{c.value}: {len(lines)}" for c, lines in self.buckets.items()]
        return f"Shopping List ({', '.join(parts)})"

    __repr__ = __str__
