"""
Application layer.

Use cases for submitting study sessions and reading statistics, written
against the repository protocols in `protocols/`.
"""
