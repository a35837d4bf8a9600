"""Models for tokens and their parsed contents."""
