"""Command-line front end for rmenu."""
