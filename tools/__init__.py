"""Security, upload, observability and generative-model helpers."""
