"""Terminal client: validation, progress feedback, submission and rendering."""
