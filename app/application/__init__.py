"""
Use cases, one per module, each a class with an `execute()` method.
They depend on domain ports only; adapters are injected by the
interfaces layer.
"""
