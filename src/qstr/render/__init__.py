"""Renderers that fold tokenized color strings into output forms."""
