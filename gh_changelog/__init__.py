"""Browse the GitHub changelog feed from the command line."""
