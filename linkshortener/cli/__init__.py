from linkshortener.cli.app import main, run_menu


__all__ = [
    'main',
    'run_menu',
]
