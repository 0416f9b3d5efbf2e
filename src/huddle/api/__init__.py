"""HTTP API for the Huddle application."""
