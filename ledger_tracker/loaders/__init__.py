# ledger_tracker/loaders/__init__.py
from ledger_tracker.loaders.base import BaseLoader, LoadResult
from ledger_tracker.loaders.ledger_file import LedgerFileLoader


def get_loader(store, config):
    return LedgerFileLoader(
        store,
        on_parse_error=config.get('on_parse_error', 'abort'),
        encoding=config.get('encoding', 'utf-8'),
    )
