"""Interview flow, tools and the investigation-points economy."""
