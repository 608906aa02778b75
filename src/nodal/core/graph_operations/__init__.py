"""Algorithms running on any graph implementing GraphProtocol."""
