"""
Measurement helpers: pattern application and display labels.
"""

import copy
import re
from typing import Any, List

from app.schemas.measurement import MeasurementSet


STANDARD_MEASUREMENT_KEYS = (
    "tourDePoitrine",
    "tourDeTaille",
    "tourDeHanches",
    "longueurBras",
    "longueurJambe",
    "carrureDos",
)

EMPTY_MEASUREMENTS_MESSAGE = "Aucune mensuration spécifiée."

_ABBREVIATIONS = (
    ("tourDe", "T."),
    ("longueur", "L."),
    ("carrure", "C."),
)

_CAMEL_BOUNDARY = re.compile(r"(?<=.)([A-Z])")


def _split_words(name: str) -> str:
    words = _CAMEL_BOUNDARY.sub(r" \1", name).strip()
    return words[:1].upper() + words[1:]


def humanize_label(name: str) -> str:
    """
    Turn a measurement key into a display label.

        tourDePoitrine -> "T. Poitrine"
        longueurBras   -> "L. Bras"
        carrureDos     -> "C. Dos"
        tourDeCou      -> "T. Cou"
        encolure       -> "Encolure"
    """
    for prefix, abbreviation in _ABBREVIATIONS:
        if name.startswith(prefix) and len(name) > len(prefix):
            return f"{abbreviation} {_split_words(name[len(prefix):])}"
    return _split_words(name)


def empty_document() -> dict:
    return MeasurementSet().to_document()


def normalize(measurements: Any) -> dict:
    """Validate a MeasurementSet, a stored document or None into a document."""
    if measurements is None:
        return empty_document()
    if isinstance(measurements, MeasurementSet):
        return measurements.to_document()
    return MeasurementSet.model_validate(measurements).to_document()


def apply_pattern(measurements: dict, pattern: Any) -> dict:
    """
    Measurements of an order after applying a pattern.

    The pattern's set replaces the current one wholesale (no merge).
    Without a pattern the current measurements are kept.
    """
    if pattern is None:
        return measurements
    return copy.deepcopy(pattern.measurements)


def measurement_entries(measurements: dict) -> List[dict]:
    """Populated standard measurements in canonical order, then custom ones."""
    document = normalize(measurements)
    unit = document["unit"]
    standard = document.get("standard", {})
    entries = []

    for key in STANDARD_MEASUREMENT_KEYS:
        value = standard.get(key)
        if value:
            entries.append({
                "key": key,
                "label": humanize_label(key),
                "value": value,
                "display": f"{value} {unit}",
            })

    for item in document.get("custom", []):
        entries.append({
            "key": item["name"],
            "label": humanize_label(item["name"]),
            "value": item["value"],
            "display": f"{item['value']} {unit}",
        })

    return entries


def build_view(measurements: dict) -> dict:
    """Display view with the explicit empty state."""
    document = normalize(measurements)
    entries = measurement_entries(document)
    return {
        "unit": document["unit"],
        "entries": entries,
        "is_empty": not entries,
        "empty_message": None if entries else EMPTY_MEASUREMENTS_MESSAGE,
    }
