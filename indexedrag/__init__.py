"""
indexedRAG - Desktop chat front-end shell

Persists a single conversation and the indexing settings in a local SQLite
database and renders them through a customtkinter window.
"""

__version__ = "0.1.0"
