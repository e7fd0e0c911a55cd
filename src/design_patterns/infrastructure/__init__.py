"""Infrastructure: logging and generic pattern support."""
