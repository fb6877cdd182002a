"""Atlas generation engine: packing, geometry and the pure generation pipeline."""
