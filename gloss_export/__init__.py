"""Export changed translation glosses from the database to a GitHub data repo."""

__version__ = "0.1.0"
