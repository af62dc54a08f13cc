"""Console front-end for the product search engine (see __main__.py and repl.py)."""
