class InvalidArgumentError(ValueError):
    """Raised when an input makes a calculation undefined."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")
