"""
Life Expectancy Reshaping Pipeline
Package for cleaning the UN life expectancy export and reshaping it into
male vs. female comparison tables.
"""

__version__ = "1.0.0"

# Lazy imports to avoid long startup times
# Import as needed in code

__all__ = ["config", "io", "errors", "cleaning", "reshape", "scoring", "qc"]
