"""Side-scrolling endless runner built from randomly chained map chunks."""

__version__ = "0.1.0"