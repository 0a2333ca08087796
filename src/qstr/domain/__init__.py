"""Domain layer: color values, palette, tokenizer, and decode tables.

This layer depends only on stdlib and pydantic.
It must never import from render, services, output, commands, or config.
"""
