"""SmartCapital chat intent parser and LINE bot entry points."""

__version__ = "1.0.0"
