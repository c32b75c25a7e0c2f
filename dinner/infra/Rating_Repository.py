import logging
from datetime import datetime, timezone

from dinner.domain.Rating import Rating
from dinner.infra.json_store import read_json_file, write_json_file
from dinner.infra import paths
from dinner.utilities.constants import METADATA_VERSION, RATINGS_DESCRIPTION

logger = logging.getLogger(__name__)


def _metadata() -> dict:
    return {
        "version": METADATA_VERSION,
        "lastUpdated": datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
        "description": RATINGS_DESCRIPTION,
    }


def load_ratings_document() -> dict:
    data = read_json_file(paths.RATINGS_FILE, {"ratings": [], "metadata": {}})
    if not isinstance(data, dict) or not isinstance(data.get("ratings"), list):
        return {"ratings": [], "metadata": {}}
    data.setdefault("metadata", {})
    return data


def load_ratings() -> list:
    return [r for r in load_ratings_document()["ratings"] if isinstance(r, dict)]


def save_ratings(ratings: list) -> bool:
    return write_json_file(paths.RATINGS_FILE, {"ratings": ratings, "metadata": _metadata()})


def add_rating(rating: Rating) -> bool:
    ratings = load_ratings_document()["ratings"]
    ratings.append(rating.to_dict())
    ok = save_ratings(ratings)
    if ok:
        logger.info("Rating added: %s", rating)
    return ok


def load_members() -> dict:
    data = read_json_file(paths.MEMBERS_FILE, {"members": []})
    if not isinstance(data, dict):
        return {"members": []}
    data.setdefault("members", [])
    return data
