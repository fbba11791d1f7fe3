"""Command line layer (Typer apps and Rich components)."""
