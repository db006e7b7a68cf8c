"""Reading and validating .ber tile maps for a collect-and-escape puzzle, with the helpers they use."""

__version__ = "1.0.0"