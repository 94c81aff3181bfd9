"""
pygame front end for Code Invaders: thin adapters over the gameplay core.
"""
