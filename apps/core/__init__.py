"""Project-level views that do not belong to a domain app."""
