"""
Livraria Catalog Service
"""
