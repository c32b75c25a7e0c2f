"""Ingredient domain entity: item name, amount text, unit, optional qualifier."""
from typing import Optional
from dinner.utilities.numbers import format_number


def _amount_text(amount) -> str:
    # JSON catalogs sometimes carry plain numbers for amount
    if amount is None:
        return ""
    if isinstance(amount, bool):
        return str(amount).lower()
    if isinstance(amount, (int, float)):
        return format_number(amount)
    return str(amount)


class Ingredient:
    def __init__(self, item: str = "", amount: str = "", unit: str = "", additional: Optional[str] = None):
        self.item = item
        self.amount = _amount_text(amount)
        self.unit = unit or ""
        self.additional = additional

    def __str__(self) -> str:
        text = f"{self.item} - {self.amount} {self.unit}".rstrip()
        if self.additional:
            text += f" ({self.additional})"
        return text

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a catalog dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            item=str(d.get("item") or ""),
            amount=d.get("amount", ""),
            unit=str(d.get("unit") or ""),
            additional=d.get("additional") or None,
        )

    def to_dict(self):
        data = {"item": self.item, "amount": self.amount, "unit": self.unit}
        if self.additional:
            data["additional"] = self.additional
        return data
