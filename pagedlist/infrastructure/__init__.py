"""Main-loop and threading adapters."""
