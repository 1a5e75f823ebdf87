"""Shared primitives (exceptions, typing aliases, reporting) for CSPFit."""
