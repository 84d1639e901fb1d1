# main.py - run the suggester demo from a source checkout

from affinity_suggester.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
