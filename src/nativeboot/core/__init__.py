"""Core utilities shared across nativeboot."""
