from dinner.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
RECIPES_FILE = DATA_DIR / 'master_recipes.json'
WEEKLY_PLANS_FILE = DATA_DIR / 'weekly_plans.json'
RATINGS_FILE = DATA_DIR / 'ratings.json'
MEMBERS_FILE = DATA_DIR / 'members.json'
UPLOADS_DIR = DATA_DIR / 'uploads'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'WEEKLY_PLANS_FILE', 'RATINGS_FILE', 'MEMBERS_FILE', 'UPLOADS_DIR']
