"""
Domain layer: models, vocabularies, exceptions, repository and provider
interfaces, and the tagging/retrieval engine. No infrastructure imports.
"""
