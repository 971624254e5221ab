"""
Infrastructure services (parsing, storage)
"""
