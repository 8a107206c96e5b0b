"""Domain layer: rules, predicates, field contract, exceptions."""
