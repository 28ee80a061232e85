class ConfigurationError(ValueError):
    """
    Exception raised when listing settings are invalid.

    Configuration errors are detected before any traversal starts, so no partial
    listing is ever produced for them. The CLI reports them on stderr and exits
    with status 1.

    Attributes:
        setting (str): Name of the offending setting.

    Example:
        >>> error = ConfigurationError("max_depth", "must be greater than 0")
        >>> str(error)
        'Invalid max_depth: must be greater than 0'
    """

    def __init__(self, setting: str, reason: str) -> None:
        """
        Initialize the exception with the setting name and the reason it was rejected.

        Args:
            setting (str): Name of the offending setting.
            reason (str): Human-readable explanation.
        """
        self.setting = setting
        super().__init__(f"Invalid {setting}: {reason}")
