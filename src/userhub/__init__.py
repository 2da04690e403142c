"""userhub - layered REST API for user accounts."""

__version__ = "0.1.0"
