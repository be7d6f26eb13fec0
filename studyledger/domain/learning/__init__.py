"""
Learning bounded context - Domain layer.

This context handles spaced repetition progress:
- Scheduling of the next review from a recall quality
- Per-item progress records
- The append-only review ledger
- Study session summaries and streaks

Aggregates:
- ItemProgress: The main aggregate root for a (user, item) pair
"""
