"""
Vocabulary backend.

Turns study documents into English-Mandarin wordlists.
"""
