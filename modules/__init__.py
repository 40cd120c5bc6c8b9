"""
Modules Package

Business Logic Layer

Modules:
- tax: Personal income tax engine, regimes and input validation

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['tax']
