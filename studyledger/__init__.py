"""studyledger: spaced repetition progress engine and review ledger."""
