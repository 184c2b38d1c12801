"""Authentication microservice: registration, login and bearer-token verification."""

__version__ = "1.0.0"
