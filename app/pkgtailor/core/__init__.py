"""Core tailoring logic: environments, persisted state and the engine."""
