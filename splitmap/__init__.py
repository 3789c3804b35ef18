"""splitmap: physical-to-electrical keymap projection for split keyboards."""

__version__ = "0.1.0"
