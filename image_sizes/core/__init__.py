"""Cross-cutting infrastructure: errors, configuration and logging."""
