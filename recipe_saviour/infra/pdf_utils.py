import io
from typing import Sequence

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from recipe_saviour.domain.Recipe import Recipe
from recipe_saviour.domain.ShoppingListItem import ShoppingListItem


def generate_pdf_for_plan(recipes: Sequence[Recipe], items: Sequence[ShoppingListItem]) -> bytes:
    """Generate a PDF with the planned meals and a shopping list table (shared items first)."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan – {len(recipes)} meals", styles["Title"]),
        Spacer(1, 12),
    ]
    for index, recipe in enumerate(recipes, start=1):
        elements.append(Paragraph(f"{index}. {recipe.title}", styles["Normal"]))
    elements.append(Spacer(1, 16))
    elements.append(Paragraph(f"Shopping List ({len(items)} items)", styles["Heading2"]))

    data = [["Item", "Recipes", "Used in"]]
    for item in items:
        data.append([
            item.display_text,
            str(item.recipe_count),
            ", ".join(dict.fromkeys(item.recipe_titles)),
        ])

    table = Table(data, repeatRows=1)
    style = [
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (1,0), (1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]
    # highlight buy-in-bulk rows
    for row, item in enumerate(items, start=1):
        if item.is_common:
            style.append(("BACKGROUND", (0,row), (-1,row), colors.HexColor("#E8F5E9")))
    table.setStyle(TableStyle(style))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
