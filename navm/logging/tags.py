# navm/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output from the different layers is easy to
grep. Changing a tag here updates it package-wide.
"""

CMD = "[CMD]"
OUTPUT = "[OUTPUT]"
VM = "[VM]"
REGISTRY = "[REGISTRY]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
