from datetime import date, datetime
from dateutil.parser import parse as parse_date, ParserError
from flask import request

PT_BR_MONTHS = (
    "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
    "jul.", "ago.", "set.", "out.", "nov.", "dez.",
)


def format_date(value):
    """pt-BR short date: 2024-08-12 -> "12 de ago. de 2024"."""
    if not value:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    elif not isinstance(value, date):
        try:
            value = parse_date(str(value)).date()
        except (ParserError, OverflowError, ValueError):
            return str(value)
    return f"{value.day:02d} de {PT_BR_MONTHS[value.month - 1]} de {value.year}"


def reading_label(minutes):
    return f"{minutes} min de leitura"


def register_template_helpers(app):
    app.add_template_filter(format_date, "format_date")
    app.add_template_filter(reading_label, "reading_label")

    @app.context_processor
    def inject_site_globals():
        return {
            "brand": {
                "name": app.config["BRAND_NAME"],
                "tagline": app.config["BRAND_TAGLINE"],
            },
            "instagram_url": app.config["INSTAGRAM_URL"],
            "marketplace_url": app.config["MARKETPLACE_URL"],
            "current_path": request.path,
        }
