"""Output layer: rich consoles and result formatting for the CLI."""
