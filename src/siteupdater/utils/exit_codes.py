"""
Exit codes for siteupdater.

Semantic exit codes so scripts driving the lifecycle commands can tell what
happened and react to it.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Required component missing on a site
ERROR_DEPENDENCY = 3

# Update pass aborted (routine missing or failed)
ERROR_UPDATE_FAILED = 4

# Resource not found
ERROR_NOT_FOUND = 5

# Permission denied
ERROR_PERMISSION_DENIED = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_DEPENDENCY: "ERROR_DEPENDENCY",
        ERROR_UPDATE_FAILED: "ERROR_UPDATE_FAILED",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
    }
    return code_names.get(code, f"UNKNOWN({code})")

