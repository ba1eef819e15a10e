"""HTTP surface for Wearorithm."""
