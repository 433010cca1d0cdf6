"""HTTP middleware for the URL shortener service."""
