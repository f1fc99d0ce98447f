"""Rule operation implementations, grouped by concern."""
