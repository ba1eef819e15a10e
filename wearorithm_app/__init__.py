"""Wearorithm application package."""
