"""CLI module for sessionbrief."""
