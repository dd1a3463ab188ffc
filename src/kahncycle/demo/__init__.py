"""Sample graphs, text rendering and file loading for the CLI."""
