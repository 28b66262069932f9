"""Storage adapters for siteupdater."""
