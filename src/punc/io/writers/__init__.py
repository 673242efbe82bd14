"""Writers persisting redacted text."""
