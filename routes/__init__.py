"""HTTP routes for the tournament signup app."""
