"""Infrastructure helpers shared across crossfile layers."""
