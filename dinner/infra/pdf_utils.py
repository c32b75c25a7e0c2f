import io
from xml.sax.saxutils import escape
from typing import List

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from dinner.domain.Recipe import Recipe
from dinner.domain.ShoppingList import CategorizedList
from dinner.logic.shopping.formatting import format_amount


def generate_pdf_for_shopping_list(shopping_list: CategorizedList, recipes: List[Recipe], title: str = "Shopping List"):
    """Printable shopping list: one table per non-empty category (Amount / Item / Recipes)."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [Paragraph(escape(title), styles["Title"]), Spacer(1, 8)]
    if recipes:
        names = ", ".join(f"{r.name} ({r.servings} servings)" for r in recipes)
        elements += [Paragraph(escape(f"Recipes for this week: {names}"), styles["Normal"]), Spacer(1, 12)]

    for category, lines in shopping_list.non_empty():
        elements.append(Paragraph(escape(category.value), styles["Heading2"]))
        data = [["", "Amount", "Item", "Recipes"]]
        for line in lines:
            item = line.item + (f" ({line.additional})" if line.additional else "")
            data.append(["[ ]", format_amount(line), item, ", ".join(line.recipes)])

        table = Table(data, repeatRows=1, colWidths=[20, 110, 200, 220])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,0), 11),
            ("BOTTOMPADDING", (0,0), (-1,0), 8),
            ("VALIGN", (0,0), (-1,-1), "TOP"),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements += [table, Spacer(1, 12)]

    if not shopping_list.non_empty():
        elements.append(Paragraph("Nothing to buy.", styles["Normal"]))

    doc.build(elements)
    return buf.getvalue()
