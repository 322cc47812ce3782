"""Core desktop services: lifecycle, configuration, settings, system information and device state managers."""

__version__ = "1.0.0"