import json
import unittest
from datetime import date

from dinner.domain.Rating import Rating
from dinner.infra import Rating_Repository
from dinner.infra.Plan_Repository import PlanRepository
from dinner.infra.Recipe_Repository import find_recipes, load_recipes, recipes_by_category
from dinner.tests.data_fixtures import TempDataDirTestCase


class TestRecipeRepository(TempDataDirTestCase):

    def test_load_recipes(self):
        recipes = load_recipes()
        self.assertEqual([r.id for r in recipes], ["a", "b", "c", "d"])
        self.assertEqual(recipes[0].total_time, 30)
        self.assertIsNone(recipes[3].ingredients)
        self.assertEqual(recipes[1].ingredients[1].additional, "minced")

    def test_find_recipes_keeps_selection_order_and_skips_unknown(self):
        found = find_recipes(["c", "missing", "a"])
        self.assertEqual([r.id for r in found], ["c", "a"])

    def test_recipes_by_category(self):
        self.assertEqual(recipes_by_category(), {
            "Chicken": ["A", "B"], "Other": ["D"], "Pasta": ["C"],
        })

    def test_broken_catalog_yields_empty_list(self):
        (self.data_dir / 'master_recipes.json').write_text("{not json", encoding='utf-8')
        self.assertEqual(load_recipes(), [])


class TestPlanRepository(TempDataDirTestCase):

    def test_missing_file_has_no_plans(self):
        self.assertEqual(PlanRepository().get_plans(), [])

    def test_save_current_week_creates_then_updates(self):
        repo = PlanRepository()
        day = date(2025, 1, 8)
        first = repo.save_current_week(["a", "b"], today=day)
        self.assertEqual(first.iso_week, "2025-W02")
        self.assertEqual((first.year, first.week), (2025, 2))

        second = repo.save_current_week(["c"], today=date(2025, 1, 10))
        self.assertEqual(second.plan_id, first.plan_id)
        self.assertEqual(second.created_at, first.created_at)

        stored = self.read_json('weekly_plans.json')
        self.assertEqual(len(stored["plans"]), 1)
        self.assertEqual(stored["plans"][0]["recipeIds"], ["c"])
        self.assertEqual(stored["metadata"]["version"], "1.0")

    def test_iso_week_across_year_boundary(self):
        plan = PlanRepository().save_current_week(["a"], today=date(2024, 12, 30))
        self.assertEqual(plan.iso_week, "2025-W01")

    def test_history_resolves_recipes(self):
        repo = PlanRepository()
        repo.save_current_week(["a"], today=date(2025, 1, 1))
        repo.save_current_week(["b", "zzz"], today=date(2025, 2, 1))
        history = repo.history(load_recipes())
        self.assertEqual([h["isoWeek"] for h in history], ["2025-W05", "2025-W01"])
        self.assertEqual(history[0]["recipes"], [{"name": "B", "category": "Chicken", "servings": 2}])

    def test_get_plan(self):
        repo = PlanRepository()
        plan = repo.save_current_week(["a"])
        self.assertEqual(repo.get_plan(plan.plan_id).recipe_ids, ["a"])
        self.assertIsNone(repo.get_plan(-1))


class TestRatingRepository(TempDataDirTestCase):

    def test_add_rating_appends(self):
        self.assertTrue(Rating_Repository.add_rating(Rating("Sam", "A", 4)))
        self.assertTrue(Rating_Repository.add_rating(Rating("Alex", "B", 5)))
        ratings = Rating_Repository.load_ratings()
        self.assertEqual([r["user"] for r in ratings], ["Sam", "Alex"])
        self.assertTrue(ratings[0]["date"].endswith("Z"))
        self.assertTrue(ratings[0]["dateFormatted"])

    def test_members_default(self):
        self.assertEqual(Rating_Repository.load_members(), {"members": []})
        with open(self.data_dir / 'members.json', 'w', encoding='utf-8') as f:
            json.dump({"members": [{"name": "Travis"}]}, f)
        self.assertEqual(Rating_Repository.load_members()["members"][0]["name"], "Travis")


if __name__ == '__main__':
    unittest.main()
