class SessionNotFoundError(LookupError):
    """Raised when a wizard session id is unknown to the session store."""
    pass


class IntakeConfigurationError(RuntimeError):
    """Raised when the real intake adapter is requested without an endpoint."""
    pass
