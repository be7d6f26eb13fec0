"""
Domain layer.

Scheduling rules, progress records, the review ledger entries, study
sessions and streaks. Nothing here imports SQLAlchemy or FastAPI.
"""
