"""Entry point for splitting delimited lines from the repository root."""

from scope_splitter.split_lines import main

if __name__ == "__main__":
    raise SystemExit(main())
