"""Foundation: configuration."""
