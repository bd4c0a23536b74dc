"""Workout tracker backend."""
