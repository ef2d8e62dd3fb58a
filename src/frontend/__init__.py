"""Flask UI and JSON API over the word replacement engine."""
