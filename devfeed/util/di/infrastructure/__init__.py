"""Infrastructure providers (mockable components)."""
