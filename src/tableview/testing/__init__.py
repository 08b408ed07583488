"""Testing – helpers for exercising table views in tests."""
