"""Minigame validation and accusation resolution."""
