"""Domain services for the tournament signup app."""
