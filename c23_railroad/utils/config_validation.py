"""
Lightweight configuration validation to catch bad section or strategy names early.
"""

from typing import Any

from ..grammar.sections import SECTION_ORDER
from ..rendering.renderer import EXPORT_STRATEGIES


def validate_config(config: Any) -> None:
    """
    Validate the render configuration before any diagram is built.
    Raises ValueError on invalid values.
    """
    html_path = config.get("output.html_path")
    sections = config.get("render.sections", list(SECTION_ORDER))
    strategies = config.get("render.strategies", list(EXPORT_STRATEGIES))
    query = config.get("render.filter", "")
    level = config.get("logging.level", "INFO")

    if not html_path:
        raise ValueError("output.html_path is not set. Point it at the HTML file to write.")

    if isinstance(sections, str) or not isinstance(sections, (list, tuple)):
        raise ValueError(f"render.sections must be a list of section ids, got {sections!r}.")
    unknown = [s for s in sections if s not in SECTION_ORDER]
    if unknown:
        raise ValueError(
            f"Unknown render.sections {unknown}. Use any of: {', '.join(SECTION_ORDER)}."
        )

    if isinstance(strategies, str) or not isinstance(strategies, (list, tuple)) or not strategies:
        raise ValueError(f"render.strategies must be a non-empty list, got {strategies!r}.")
    unknown = [s for s in strategies if s not in EXPORT_STRATEGIES]
    if unknown:
        raise ValueError(
            f"Unknown render.strategies {unknown}. Use any of: {', '.join(EXPORT_STRATEGIES)}."
        )

    if not isinstance(query, str):
        raise ValueError(f"render.filter must be a string, got {query!r}.")

    if str(level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Unsupported logging.level '{level}'.")
