"""Package entry point for ``python -m bibicode``.

WHY: Users run the converter as ``python -m bibicode -f dec -t hex 2000``
without relying on the installed console script.

HOW: Delegates to the CLI's main() function.
"""

from bibicode.cli import main

if __name__ == "__main__":
    main()
