"""Where the browser view of the quiz is served."""

# Loopback only: the browser view drives the same single session as the window.
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
