"""Identity ports."""
