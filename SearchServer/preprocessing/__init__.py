"""
Preprocessing module for text processing in the search server.
Includes whitespace tokenization, word validation and stop word filtering.
"""
