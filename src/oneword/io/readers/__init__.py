"""Format specific document readers."""
