"""Domain modules for fastfuzzy."""
