"""
Chat package: keyword-matching question answering over farming conditions.

Modules:
    responder — CHAT_RULES table + answer().
"""
