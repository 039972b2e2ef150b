"""Package entry point for ``python -m typoglycemia``.

WHY: Users run the shuffler as ``python -m typoglycemia in.txt out.txt``
without installing the console script.

HOW: Delegates to the CLI's main() function.
"""

from typoglycemia.cli import main

if __name__ == "__main__":
    main()
