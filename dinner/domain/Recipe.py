"""Recipe domain entity: catalog entry with category, timings, servings and ingredients."""
from dinner.domain.Ingredient import Ingredient
from typing import List, Optional


class Recipe:
    def __init__(self, id: str = "", name: str = "", category: str = "", servings: int = 0,
                 prep_time: int = 0, cook_time: int = 0, ingredients: Optional[List[Ingredient]] = None):
        self.id = id
        self.name = name
        self.category = category
        self.servings = servings
        self.prep_time = prep_time
        self.cook_time = cook_time
        # None means the catalog entry had no ingredients list at all
        self.ingredients = ingredients[:] if ingredients is not None else None

    def __str__(self) -> str:
        return f"{self.name} - {self.category} - {self.servings} servings - {self.total_time} min"

    __repr__ = __str__

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        raw_ingredients = d.get('ingredients')
        ingredients = None
        if isinstance(raw_ingredients, list):
            ingredients = [Ingredient.from_dict(ing) for ing in raw_ingredients]
        return Recipe(
            id=str(d.get('id') or d.get('recipeId') or ''),
            name=d.get('name', ''),
            category=d.get('category', ''),
            servings=d.get('servings', 0) or 0,
            prep_time=d.get('prepTime', 0) or 0,
            cook_time=d.get('cookTime', 0) or 0,
            ingredients=ingredients,
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
        }
        if self.ingredients is not None:
            data["ingredients"] = [ing.to_dict() for ing in self.ingredients]
        return data

    def summary(self):
        return {"name": self.name, "category": self.category, "servings": self.servings}
