#!/usr/bin/env python3
"""Rank candidates for a job"""
import sys

from talentmatch.cli import main

if __name__ == "__main__":
    sys.exit(main())
