"""Concealed-hand evaluation and scoring engine."""
