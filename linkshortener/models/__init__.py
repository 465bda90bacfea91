from linkshortener.models.entry_model import Entry


__all__ = ['Entry']
