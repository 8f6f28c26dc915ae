"""Fitness tracking backend: users and their trainings."""
