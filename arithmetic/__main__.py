"""Package entry point for ``python -m arithmetic``.

WHY: Users run the calculator as ``python -m arithmetic "12-(4*3)"`` or
start the API with ``python -m arithmetic --serve``. Python's ``-m``
flag looks for ``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main(), which handles --serve itself.
"""

from arithmetic.cli import main

if __name__ == "__main__":
    main()
