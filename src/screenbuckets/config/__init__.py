"""Static configuration for screenbuckets."""
