"""Flask front end (JSON API + minimal page) for the sentence anagram engine."""
from .web import app, main

__all__ = ["app", "main"]
