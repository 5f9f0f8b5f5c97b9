"""Domain layer: error kinds, argument validators and the service protocol."""
