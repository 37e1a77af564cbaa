"""Android App Links / iOS Universal Links resolver for the Wasl app."""

__version__ = "0.1.0"
