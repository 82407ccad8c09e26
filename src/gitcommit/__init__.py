"""gitcommit - Create Git commits with custom dates."""

__version__ = "1.0.0"
