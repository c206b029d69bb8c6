"""magic-opener: an `open` replacement that tries to do the right thing."""

__version__ = "0.2.2"
