"""Error classes and pre-defined error instances."""
