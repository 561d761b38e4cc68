"""Gem Slots: a seven-slot gem wagering game."""
