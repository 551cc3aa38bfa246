"""Resume and cover-letter tailoring engine with job match scoring."""

__version__ = "0.1.0"
