"""Synthetic price and trade timelines for the pairs dashboard."""
