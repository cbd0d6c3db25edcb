"""Options, filters, command-line handling and formatters for viewing debugging information."""

__version__ = "0.1.0"