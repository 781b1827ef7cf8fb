"""Validation rules for books."""

from catalog_api.core.timeutils import Clock, utcnow
from catalog_api.schemas.book import BookCreate
from catalog_api.validators.rules import Rule, RuleSetValidator, is_blank


class BookValidator(RuleSetValidator[BookCreate]):
    def __init__(self, clock: Clock = utcnow):
        self.clock = clock
        self.rules = [
            Rule("Title is required.", lambda b: not is_blank(b.title)),
            Rule("Title cannot exceed 200 characters.", lambda b: len(b.title) <= 200),
            Rule("Author is required.", lambda b: not is_blank(b.author)),
            Rule("Author name cannot exceed 100 characters.", lambda b: len(b.author) <= 100),
            Rule("Year must be greater than 0.", lambda b: b.year > 0),
            Rule("Year cannot be in the future.", lambda b: b.year <= self.clock().year),
        ]
