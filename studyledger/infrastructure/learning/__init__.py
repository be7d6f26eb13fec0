"""Learning infrastructure."""
