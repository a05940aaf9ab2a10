"""Labor Calc - statutory end-of-service, overtime and leave calculations."""

__version__ = "0.1.0"
