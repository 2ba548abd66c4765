"""Command-line prompt for register exploration."""
