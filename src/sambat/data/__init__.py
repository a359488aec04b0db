"""Bundled year table (bs_years.csv), read through importlib.resources."""
