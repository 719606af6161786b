"""A small pygame space game built on an entity-component design, with menu and play scenes."""

__version__ = "0.1.0"