"""Numeric and boundary helpers with no dependency on the palette package."""
