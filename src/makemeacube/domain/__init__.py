"""Domain layer: business rules with no infrastructure dependencies."""
