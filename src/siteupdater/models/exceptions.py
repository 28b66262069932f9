"""Custom exceptions for siteupdater."""


class SiteUpdaterError(Exception):
    """Base exception for all siteupdater errors."""


class RoutineNotFoundError(SiteUpdaterError):
    """Raised when no update routine is registered for a required version."""

    def __init__(self, version: int):
        super().__init__(f"Update routine not found for database version {version}")
        self.version = version


class RoutineRegistryError(SiteUpdaterError):
    """Raised when the routine table is malformed (duplicates or gaps)."""


class InvalidConfigurationError(SiteUpdaterError):
    """Raised when a persisted configuration record has an invalid shape."""


class PermissionDeniedError(SiteUpdaterError):
    """Raised when the operator lacks the capability an action requires."""

    def __init__(self, capability: str, message: str | None = None):
        super().__init__(
            message or f"You don't have proper authorization ({capability} required)"
        )
        self.capability = capability


class MissingDependencyError(SiteUpdaterError):
    """Raised when a required component is not active on a site."""

    def __init__(self, component: str, site_id: int | None = None):
        if site_id is None:
            message = f"This plugin requires {component} to be active!"
        else:
            message = f"This plugin requires {component} to be active on site: {site_id}"
        super().__init__(message)
        self.component = component
        self.site_id = site_id


class SiteNotFoundError(SiteUpdaterError):
    """Raised when a site id does not exist in the site registry."""

    def __init__(self, site_id: int):
        super().__init__(f"Site {site_id} not found")
        self.site_id = site_id
