"""SceneBay: AI-assisted area scouting for film productions."""

__version__ = "0.1.0"
