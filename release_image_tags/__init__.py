"""Release image tag classification and version validation."""
