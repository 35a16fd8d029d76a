"""Gameplay systems: collision hitboxes and the enemy pool."""
