"""Follow collections service package."""
