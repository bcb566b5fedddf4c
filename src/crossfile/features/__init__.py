"""Feature packages for crossfile."""
