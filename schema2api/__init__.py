"""
schema2api: mock REST server driven by an uploaded JSON Schema.
"""

__version__ = "0.1.0"
