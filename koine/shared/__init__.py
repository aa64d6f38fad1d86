# koine\shared\__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by the core and the command-line shell:
- Configuration management
- Structured logging
- Distributed tracing (Observability)
"""
