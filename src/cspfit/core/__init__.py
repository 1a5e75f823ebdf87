"""Core algorithms and domain models for CSPFit."""
