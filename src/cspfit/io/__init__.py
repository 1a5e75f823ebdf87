"""File input/output: configuration, concentrations and result writers."""
