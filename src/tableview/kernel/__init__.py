"""Kernel – error hierarchy, value model and field access."""
