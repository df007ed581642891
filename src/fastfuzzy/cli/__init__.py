"""Command-line interface for fastfuzzy."""
