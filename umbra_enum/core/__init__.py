"""
Core - Logging e utilitários
"""
