"""Temporary data directory for tests that touch the JSON files."""
import json
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dinner.infra import paths

CATALOG = {
    "recipes": [
        {
            "id": "a", "name": "A", "category": "Chicken", "prepTime": 10, "cookTime": 20, "servings": 4,
            "ingredients": [{"item": "Chicken Breast", "amount": "2", "unit": "lb"}],
        },
        {
            "id": "b", "name": "B", "category": "Chicken", "prepTime": 5, "cookTime": 15, "servings": 2,
            "ingredients": [
                {"item": "chicken breast", "amount": "1", "unit": "lb"},
                {"item": "Garlic", "amount": "3", "unit": "clove", "additional": "minced"},
            ],
        },
        {
            "id": "c", "name": "C", "category": "Pasta", "prepTime": 5, "cookTime": 10, "servings": 6,
            "ingredients": [
                {"item": "Salt", "amount": "to taste", "unit": ""},
                {"item": "Sriracha", "amount": "1", "unit": "tbsp"},
            ],
        },
        {"id": "d", "name": "D", "category": "Other", "prepTime": 0, "cookTime": 0, "servings": 1},
    ]
}


class TempDataDirTestCase(unittest.TestCase):
    """Points every data file path at a fresh temporary directory."""

    def setUp(self):
        super().setUp()
        self.data_dir = Path(tempfile.mkdtemp(prefix="dinner_test_"))
        self.addCleanup(shutil.rmtree, self.data_dir, ignore_errors=True)
        with open(self.data_dir / 'master_recipes.json', 'w', encoding='utf-8') as f:
            json.dump(CATALOG, f)
        targets = {
            'RECIPES_FILE': self.data_dir / 'master_recipes.json',
            'WEEKLY_PLANS_FILE': self.data_dir / 'weekly_plans.json',
            'RATINGS_FILE': self.data_dir / 'ratings.json',
            'MEMBERS_FILE': self.data_dir / 'members.json',
            'UPLOADS_DIR': self.data_dir / 'uploads',
        }
        for name, value in targets.items():
            patcher = mock.patch.object(paths, name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def read_json(self, name):
        with open(self.data_dir / name, encoding='utf-8') as f:
            return json.load(f)
