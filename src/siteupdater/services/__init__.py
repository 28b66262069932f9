"""Services for siteupdater: configuration, options, components and host wiring."""
