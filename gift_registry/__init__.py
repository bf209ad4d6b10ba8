"""Gift registry backend: photo-tagged item inventory with conversational search."""
