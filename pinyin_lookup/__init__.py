"""
pinyin_lookup: Chinese Character to Hanyu Pinyin Lookup Library

Resolves single Chinese characters to their known Hanyu Pinyin readings from a
static, pre-built codepoint table.
"""

__version__ = "0.1.0"

__all__ = ["PinyinResolver", "PinyinTableConfig", "get_default_resolver", "resolve"]

_RESOLVER_EXPORTS = ("PinyinResolver", "get_default_resolver", "resolve")


def __getattr__(name):
    """Lazy import so the table module is only loaded when used."""
    if name in _RESOLVER_EXPORTS:
        from pinyin_lookup import resolver
        return getattr(resolver, name)
    if name == "PinyinTableConfig":
        from pinyin_lookup.types import PinyinTableConfig
        return PinyinTableConfig
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
