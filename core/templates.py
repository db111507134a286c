
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.config import settings
from services.pricing_service import format_currency

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)
env.filters["currency"] = format_currency
env.globals["settings"] = settings


def render(template_name: str, **context) -> str:
    return env.get_template(template_name).render(**context)
