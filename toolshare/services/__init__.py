"""Store repositories and the collections they serve."""
