"""Infrastructure helpers: logging, paths and persisted configuration."""
