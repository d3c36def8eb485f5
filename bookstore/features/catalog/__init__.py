"""
Catalog feature: autores, livros, categorias e editoras
"""
