"""
ZooSim package

This package provides a modular architecture for the ZooSim zoo
management game.  It separates the daily turn engine, domain objects,
data tables and user interface into distinct subpackages to encourage
maintainability and clarity.
"""

__version__ = "1.0.0"

__all__ = ["core", "domain", "data", "ui"]
