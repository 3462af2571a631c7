"""File age check - a monitoring plugin reporting how stale a file is."""

__version__ = "1.0.0"
