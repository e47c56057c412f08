"""Engine-wide configuration."""
