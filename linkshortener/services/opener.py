"""Hand resolved targets over to an external application.

Any callable accepting the target string can act as an opener. The default
one delegates to the `webbrowser` module (i.e. the user's default browser).
"""

import logging
import webbrowser
from collections.abc import Callable
from typing import TypeAlias


logger = logging.getLogger(__name__)

Opener: TypeAlias = Callable[[str], object]


def open_in_browser(target: str) -> bool:
    """Open `target` in the default browser

    Returns:
        bool: True if a browser was launched, False otherwise.
    """
    opened = webbrowser.open(target)
    if not opened:
        logger.warning('No browser could be launched for target.', extra={'target': target})
    return opened
