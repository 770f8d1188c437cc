"""Domain layer: value objects, exceptions, ports. No I/O."""
