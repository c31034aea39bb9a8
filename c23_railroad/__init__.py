"""
C23 railroad diagrams: a transcription of the C23 grammar (Annex A) into
railroad syntax diagrams for documentation.
"""

__version__ = "0.1.0"

# Entry points:
#   from c23_railroad.grammar import build_registry
#   from c23_railroad.rendering import DiagramRenderer, render_all_sections

__all__ = ["__version__"]
