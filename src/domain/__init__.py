"""Domain layer - core business logic and domain models."""
