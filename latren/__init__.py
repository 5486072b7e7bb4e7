"""Core building blocks of a small game engine: entity-component system,
resource paths and managers, CFG data model, deserialization, geometry
helpers and frame timing."""

__version__ = "0.1.0"