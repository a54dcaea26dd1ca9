"""Dragons, dragon flights and passengers of a film studio, kept as JSON."""

__version__ = "0.1.0"
__all__ = ["drache", "drachenart", "drachenflug", "filmstudio"]