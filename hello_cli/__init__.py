"""hello-cli: greet people in their language, at the right time of day."""

__version__ = "0.1.0"
