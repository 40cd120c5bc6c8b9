"""
Library Package

Collaborators around the tax engine:
- fx_rates: exchange-rate lookup and conversion
- formatting: display formatting and form-field parsing
- share: share message and links
- export: CSV/JSON export of results

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['fx_rates', 'formatting', 'share', 'export']
