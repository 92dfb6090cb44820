"""
Infrastructure: configuration, logging and concrete update sources.
"""
