#!/usr/bin/env python3
"""
query_parser.py - Extract subject, rating, and keyword filters from user queries
"""

import re
from typing import NamedTuple, Callable
from models import SearchCriteria

WORD = r"\w+"
NUMBER = r"\d+(?:\.\d+)?"


class ExtractionRule(NamedTuple):
    field: str
    triggers: tuple
    value_pattern: str
    convert: Callable

    def compile(self):
        triggers = "|".join(self.triggers)
        # trigger words match as prefixes ("ratings", "teaches"); values are whole tokens
        return re.compile(rf"\b(?:{triggers})\w*.*?(?<![\w.])({self.value_pattern})(?!\.?\w)",
                          re.IGNORECASE | re.DOTALL)


RULES = (
    ExtractionRule("subject", ("subject", "course", "teach"), WORD, str),
    ExtractionRule("rating", ("rating", "stars", "score"), NUMBER, float),
    ExtractionRule("keywords", ("focus", "expertise", "specialty"), WORD, str.lower),
)


class QueryParser:
    def __init__(self, rules=RULES):
        self.rules = [(rule, rule.compile()) for rule in rules]

    def extract(self, rule, pattern, query):
        """Apply a single rule; first match wins, no match yields None"""
        match = pattern.search(query)
        if not match:
            return None
        return rule.convert(match.group(1))

    def parse_query(self, query):
        criteria = {}
        for rule, pattern in self.rules:
            value = self.extract(rule, pattern, query or "")
            if value is not None:
                criteria[rule.field] = value
        return SearchCriteria(**criteria)


def main():
    parser = QueryParser()

    test_queries = [
        "I want ratings around 4.5 stars",
        "Who teaches calculus with a score of 4?",
        "Professors whose expertise is Robotics",
        "top professors for data science",
    ]

    for query in test_queries:
        print(f"Query: {query}")
        print(f"Parsed: {parser.parse_query(query).as_filter()}")
        print("-" * 50)


if __name__ == "__main__":
    main()
