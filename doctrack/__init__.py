"""doctrack: HR document compliance backend (employees, document types, submissions)."""
