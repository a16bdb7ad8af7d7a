"""Domain layer - roles, access policy, entities, exceptions."""
