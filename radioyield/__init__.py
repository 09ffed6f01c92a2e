"""Water radiolysis species, dissociation channels and G-value analysis and plots."""

__version__ = "0.1.0"

__all__ = [
    "occupancy",
    "molecules",
    "channels",
    "let_yields",
    "time_yields",
    "plotting",
    "cli",
]