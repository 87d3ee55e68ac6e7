"""Building blocks for evolving modular recurrent neural networks: geometry, random numbers, versions, parse elements, nodes, networks, statistics and schema parts."""

__version__ = "0.1.0"