"""Application layer: settings, services and user interfaces."""
