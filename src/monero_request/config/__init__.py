"""Configuration for the monero-request command-line tool."""
