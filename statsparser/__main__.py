# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Allow running statsparser as a module: python -m statsparser
"""

from statsparser.cli import main

if __name__ == "__main__":
    main()
