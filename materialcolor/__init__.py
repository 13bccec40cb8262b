"""Color conversions and image color quantization on ARGB integers."""

__version__ = "0.1.0"
__all__ = ["utils", "lab", "wu", "wsmeans", "celebi"]