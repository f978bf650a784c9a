"""
Result models module.

Derived values handed to the presentation layer: accuracy metrics,
prediction summaries and the combined chart view.
"""
