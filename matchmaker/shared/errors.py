class MatchmakerError(Exception):
    """Base class for all matchmaker errors."""


class ConfigError(MatchmakerError):
    """Raised when the configuration file cannot be read, upgraded or validated."""


class ProvisioningError(MatchmakerError):
    """Raised when a dedicated server could not be provisioned for a request."""

    diagnostic = "provisioning failed"

    def to_diagnostic(self) -> str:
        """Text sent back to the client in place of a port."""
        reason = str(self)
        return f"{self.diagnostic}: {reason}" if reason else self.diagnostic


class NoAvailablePortError(ProvisioningError):
    diagnostic = "no ports"

    def to_diagnostic(self) -> str:
        return self.diagnostic


class WorkspaceError(ProvisioningError):
    diagnostic = "workspace failed"


class LaunchError(ProvisioningError):
    diagnostic = "launch failed"
