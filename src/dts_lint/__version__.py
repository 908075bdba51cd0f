"""Version information for dts-lint."""
__version__ = "0.1.0"
