"""projboard — terminal project board backed by an observable project store."""

__version__ = "0.1.0"
