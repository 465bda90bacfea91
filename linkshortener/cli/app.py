"""Interactive text menu for the link shortener

Options:
    [1] Create link    [2] Follow link    [3] List user links
    [4] Delete link    [5] Quit

Errors raised by the service are printed and the menu keeps running.
"""

import logging
from collections.abc import Callable

from linkshortener.exceptions import LinkShortenerError
from linkshortener.services import ShortenerService, open_in_browser
from linkshortener.services.opener import Opener
from linkshortener.utils import initialize_logging, load_config


logger = logging.getLogger(__name__)

MENU = 'Options: [1] Create link [2] Follow link [3] List user links [4] Delete link [5] Quit'


def _create(service: ShortenerService, prompt: Callable[[str], str]) -> None:
    target = prompt('Enter the original URL: ')
    user_id = prompt('Enter the user ID: ')
    max_uses = int(prompt('Enter the maximum number of uses: '))
    ttl_seconds = int(prompt('Enter the TTL in seconds: '))

    identifier = service.create_short_link(target, user_id, max_uses, ttl_seconds)
    print(f'Short link created: {identifier}')


def _follow(service: ShortenerService, prompt: Callable[[str], str], opener: Opener) -> None:
    identifier = prompt('Enter the short link ID: ')
    target = service.open_link(identifier, opener=opener)
    print(f'Opening {target}')


def _list(service: ShortenerService, prompt: Callable[[str], str]) -> None:
    user_id = prompt('Enter the user ID: ')
    entries = service.list_links_for_user(user_id)
    if not entries:
        print('No links found for this user.')
        return

    print(f'Links for user {user_id}:')
    for entry in entries:
        # fmt: off
        print(f'- {entry.identifier} -> {entry.target} '
              f'({entry.remaining_uses}/{entry.max_uses} uses left, expires {entry.expires_at.isoformat(timespec="seconds")})')
        # fmt: on


def _delete(service: ShortenerService, prompt: Callable[[str], str]) -> None:
    identifier = prompt('Enter the short link ID to delete: ')
    service.delete_link(identifier)
    print('Link deleted (if it existed).')


def run_menu(service: ShortenerService, prompt: Callable[[str], str] = input, opener: Opener = open_in_browser) -> None:
    """Run the menu loop until the user quits or input ends

    Args:
        service (ShortenerService):
            Service the menu operates on.
        prompt (Callable[[str], str]):
            Input function, `input` by default.
        opener (Opener):
            Receives resolved targets, the default browser by default.
    """
    actions = {
        '1': lambda: _create(service, prompt),
        '2': lambda: _follow(service, prompt, opener),
        '3': lambda: _list(service, prompt),
        '4': lambda: _delete(service, prompt),
    }

    print('Welcome to the link shortener!')
    while True:
        print(MENU)
        try:
            choice = prompt('> ').strip()
        except EOFError:
            break

        if choice == '5':
            print('Goodbye!')
            break

        action = actions.get(choice)
        if action is None:
            print('Invalid choice. Try again.')
            continue

        try:
            action()
        except LinkShortenerError as e:
            print(f'Error: {e}')
        except ValueError:
            print('Error: expected a whole number.')
        except EOFError:
            break


def main() -> None:
    initialize_logging()
    config = load_config()
    logger.debug('Starting interactive menu.', extra={'janitorInterval': config.janitor_interval})
    with ShortenerService.from_config(config) as service:
        run_menu(service)


if __name__ == '__main__':  # pragma: no cover
    main()
