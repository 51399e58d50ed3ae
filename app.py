#!/usr/bin/env python3
"""Rhyme Finder entry point for hosted deployments."""

from rhyme_finder.app.app import main


if __name__ == "__main__":
    main()
