"""Graph, metabolic network, trie dictionary and knapsack exercises."""

__version__ = "0.1.0"