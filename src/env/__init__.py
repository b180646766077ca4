"""Gymnasium environment around the Flappy Gate game."""
