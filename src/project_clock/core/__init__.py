"""Core building blocks shared by the engine: errors, instants, ports."""
