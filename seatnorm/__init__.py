"""seatnorm: resolve vendor section/row labels against a venue manifest."""

__version__ = "0.1.0"
