"""artmatch: candidate ranking for artist/curator project matching."""

__version__ = "0.1.0"
