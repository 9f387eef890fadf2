"""Small text utilities: delimited-field streams, template tokens, HTML escaping and system error messages."""

__version__ = "0.1.0"
__all__ = ["csvstream", "escaping", "template_token", "syserror"]