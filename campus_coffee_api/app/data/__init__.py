"""SQLite implementations of the data ports."""
