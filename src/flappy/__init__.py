"""Flappy Gate: a single-screen flap-through-the-gates arcade game on pygame."""
