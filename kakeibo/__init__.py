"""Household finance tracking core: projections, rollover and budgets."""
