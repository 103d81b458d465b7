"""Runtime utilities

Functions:
    app_env() -> str:
        Current application environment, 'local' by default.
    running_locally() -> bool:
        True if the service runs on a developer machine, False otherwise.

Example:
    >>> from linkshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'prod'
    >>> running_locally()
    False
"""

import os

from linkshortener.constants import ENV


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Lowercased value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'Prod'
        >>> app_env()
        'prod'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def running_locally() -> bool:
    """Return True if running on a developer machine (APP_ENV=local), False otherwise."""
    return app_env() == 'local'
