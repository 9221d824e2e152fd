# contractfn/logging/tags.py
"""
Logging subsystem tags.

Prefixing messages with a tag keeps log output searchable.
"""

CONTRACT = "[CONTRACT]"
VALIDATION = "[VALIDATION]"
GENERIC = "[GENERIC]"
CONFIG = "[CONFIG]"
