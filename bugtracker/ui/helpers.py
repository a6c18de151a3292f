"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from datetime import datetime

from bugtracker.config import (
    COLOR_TEXT_MUTED,
    SEVERITY_COLOR_DEFAULT,
    SEVERITY_COLORS,
    STATUS_COLORS,
)

STATUS_LABELS = {
    "open": "Ouvert",
    "in-progress": "En cours",
    "resolved": "Résolu",
}

SEVERITY_LABELS = {
    "low": "Faible",
    "medium": "Moyenne",
    "high": "Haute",
    "critical": "Critique",
}

FILTER_LABELS = {"all": "Tous", **STATUS_LABELS}


def format_datetime(iso_str: str) -> str:
    """ISO 8601 string to "DD/MM/YYYY HH:MM" in local time; fallback to raw on error."""
    try:
        dt = datetime.fromisoformat(iso_str.replace("Z", "+00:00"))
        return dt.astimezone().strftime("%d/%m/%Y %H:%M")
    except (ValueError, TypeError, AttributeError):
        return iso_str or ""


def severity_colors(severity: str) -> tuple[str, str]:
    """(background, foreground) for a severity badge."""
    return SEVERITY_COLORS.get(severity, SEVERITY_COLOR_DEFAULT)


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, COLOR_TEXT_MUTED)


def empty_state_hint(total: int) -> str:
    """Second line under "Aucun bug trouvé": nothing recorded yet, or nothing matching."""
    if total == 0:
        return "Commencez par créer votre premier ticket !"
    return "Essayez de modifier vos filtres"
