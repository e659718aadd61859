"""Band poster extraction service."""
