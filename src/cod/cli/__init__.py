"""Command-line demos (requires the ``cli`` extra)."""
