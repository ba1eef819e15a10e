"""Request schemas, prompt builders and dashboard statistics."""
