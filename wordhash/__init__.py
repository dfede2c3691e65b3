"""Fixed-size string hash sets and maps, and a word toolkit: trie, autocorrect, KMP search."""

__version__ = "0.1.0"