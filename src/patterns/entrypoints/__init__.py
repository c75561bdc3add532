"""Entrypoints (inbound adapters) for PATTERNS.

Parse and validate CLI input, turn it into service-layer commands, and present
results. Dependency rule: talk to `patterns.bootstrap` and
`patterns.service_layer`, not to the pattern modules directly.
"""
