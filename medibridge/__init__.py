"""
MediBridge - medical speech translation service

Glossary substitution, provider failover and a glossary word fallback
behind a single POST /api/translate endpoint.
"""

__version__ = "1.0.0"
