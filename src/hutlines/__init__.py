"""Synergy-aware line builder for rated hockey card pools."""
