"""AS400 service-program catalog."""

__version__ = "0.1.0"
