"""Command line interface: explorer session runner and color decoder."""
