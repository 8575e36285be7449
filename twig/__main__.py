"""Module entrypoint for ``python -m twig``.

All argument parsing and output happen in ``twig.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
