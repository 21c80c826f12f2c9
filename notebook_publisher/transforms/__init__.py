"""Transforms applied to note text before rendering."""
