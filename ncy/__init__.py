"""ncy - a command-line PKM tool for vaults of markdown notes."""

__version__ = "0.1.0"
