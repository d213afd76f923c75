"""Wordlist reader."""
