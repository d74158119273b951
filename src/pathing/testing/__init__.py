"""Test helpers for the pathfinding engine."""
