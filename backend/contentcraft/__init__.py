"""ContentCraft backend - compliant HCP video generation."""
