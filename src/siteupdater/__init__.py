"""siteupdater - lifecycle and versioned database updates for multi-site option stores."""

__version__ = "1.0.0"
