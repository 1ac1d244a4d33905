"""
Commands - Comandos da CLI
"""
