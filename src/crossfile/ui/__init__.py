"""User interface layers for crossfile."""
