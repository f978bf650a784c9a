"""
Series data module.

Immutable price and forecast points, series validation, and the synthetic
series generator.
"""
