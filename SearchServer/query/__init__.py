"""
Query parsing for the search server: plus words are required, words
prefixed with '-' exclude documents.
"""
