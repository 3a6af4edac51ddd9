#!/usr/bin/env python3
"""
Build the site described by config.yml.

    python build.py               # clean build into dist/
    python build.py --watch       # clean build, then rebuild on changes
    python build.py site.yml      # use another config file
"""
from folio.cli import main

if __name__ == "__main__":
    main()
