"""Storage infrastructure: relational database and local blob fallback."""
