"""Shared helpers for ldgraph."""
