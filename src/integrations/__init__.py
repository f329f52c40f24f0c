"""Remote backends for page content."""
