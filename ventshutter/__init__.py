"""Step-driven controller for a motorised ventilation duct shutter."""

__version__ = "0.1.0"
__all__ = ["controller", "counters", "indication", "io", "states"]