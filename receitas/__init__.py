"""Recipes API: recipe records plus sign-up / sign-in with session tokens."""
