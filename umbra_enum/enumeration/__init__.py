"""
Enumeration - Wordlist, alvo, scan HTTP e resultados
"""
