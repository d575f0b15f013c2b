"""Used-vehicle dealership inventory management."""
