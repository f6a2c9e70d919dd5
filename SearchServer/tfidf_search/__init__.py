"""
TF-IDF search module: an inverted index of normalized term frequencies and
the search server that ranks documents by TF-IDF relevance to a query.
"""
