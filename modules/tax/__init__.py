"""
Tax Module

Deterministic personal income tax estimation.

Features:
- Pure engine: TaxInputs -> itemized TaxResult
- Versioned, injectable tax regimes (bands, caps, rates)
- Validation pass that rejects or clamps bad form data

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['engine', 'regimes', 'regime_config', 'tax_models', 'validation']
