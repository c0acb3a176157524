"""Record-editing action bar: button state derivation and command routing."""

__version__ = "0.1.0"
