"""Cities and roads as a weighted directed graph, with path search, layout and a Tk interface."""

__version__ = "0.1.0"