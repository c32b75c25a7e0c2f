"""Rating domain entity: one family member's score for a recipe."""
from datetime import datetime, timezone


class Rating:
    def __init__(self, user: str, recipe: str, score: int, date: str = "", date_formatted: str = ""):
        now = datetime.now(timezone.utc)
        self.user = user
        self.recipe = recipe
        self.score = score
        self.date = date or now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
        self.date_formatted = date_formatted or now.astimezone().strftime("%m/%d/%Y, %I:%M:%S %p")

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Rating(
            user=d.get("user", ""),
            recipe=d.get("recipe", ""),
            score=d.get("score", 0),
            date=d.get("date", ""),
            date_formatted=d.get("dateFormatted", ""),
        )

    def to_dict(self):
        return {
            "user": self.user,
            "recipe": self.recipe,
            "score": self.score,
            "date": self.date,
            "dateFormatted": self.date_formatted,
        }

    def __str__(self) -> str:
        return f"{self.user} rated {self.recipe}: {self.score}/5"

    __repr__ = __str__
