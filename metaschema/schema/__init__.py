"""Class, property and enum models built from JSON-like definitions."""
