"""LibSim - Utilities Package

This package contains helper modules for the CLI layer:
- Input validation
- Output mode aware printing
"""
