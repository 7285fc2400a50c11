"""Monster scream-power tournaments with Graphviz DOT bracket output."""

__version__ = "0.1.0"