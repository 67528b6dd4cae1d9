"""Infrastructure: rate limiting, HTTP transport, logging."""
