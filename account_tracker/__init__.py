"""Account tracker: recurring-transaction projection and balance views."""

__version__ = "0.1.0"

__all__ = ["__version__"]
