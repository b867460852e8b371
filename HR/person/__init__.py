"""
Persona and the documentary part of the legajo: identity, documents,
addresses, degrees, uploaded files and their verification.
"""
