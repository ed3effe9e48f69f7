"""ShortMyURL: short links with visit statistics."""

__version__ = "0.1.0"
