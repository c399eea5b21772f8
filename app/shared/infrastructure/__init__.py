"""
Infrastructure layer package for the Oyster Review Application.
Provides database connections and the review API client.
"""
