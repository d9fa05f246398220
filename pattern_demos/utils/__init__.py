"""
Utility functions module.

Wall-clock helpers shared by the demonstrations. Log entry timestamps use
the local wall clock, matching what a console user would expect to see.
"""
