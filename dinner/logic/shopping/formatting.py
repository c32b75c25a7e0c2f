"""Display helpers shared by the HTML page, the PDF export and the JSON API."""
from dinner.domain.ShoppingList import AggregatedLine, CategorizedList
from dinner.utilities.constants import TO_TASTE


def format_amount(line: AggregatedLine) -> str:
    if line.amount and line.amount != TO_TASTE:
        return f"{line.amount} {line.unit}".strip()
    return line.amount or ''


def format_line(line: AggregatedLine) -> str:
    text = f"{format_amount(line)} {line.item}".strip()
    if line.additional:
        text += f" ({line.additional})"
    return text


def serialize_shopping_list(shopping_list: CategorizedList):
    """Six buckets in display order, each item with its display string."""
    categories = []
    for category, lines in shopping_list:
        items = []
        for line in lines:
            entry = line.to_dict()
            entry['display'] = format_line(line)
            items.append(entry)
        categories.append({'category': category.value, 'items': items})
    return categories


__all__ = ['format_amount', 'format_line', 'serialize_shopping_list']
