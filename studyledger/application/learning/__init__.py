"""Learning application module: reviews, progress and statistics."""
