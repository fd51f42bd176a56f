"""LibSim - Personal Library Catalog Package

This package contains the catalog modules including:
- Record data model (record.py)
- Flat-file storage codec (storage.py)
- Catalog loading, sorting and lookup (loader.py, sorter.py, locator.py)
- Catalog engine (catalog.py)
- CLI interface (cli.py)
"""

__version__ = "1.0.0"
