"""Use cases that turn mapping sources into running redirect dispatchers."""
