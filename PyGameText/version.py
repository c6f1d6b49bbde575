__version__ = "v0.3.1"
