"""API Key Directory: cursor-paginated listing of API keys."""

__version__ = "1.0.0"
