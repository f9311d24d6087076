"""Domain-specific library modules.

Modules here import songlist domain models and provide higher-level logic
(title parsing, etc.). Pure utilities that don't depend on domain models
live in ``songlist.utils`` instead.

Consumers should import directly from submodules::

    from songlist.lib.parsing import fallback_parse
"""
