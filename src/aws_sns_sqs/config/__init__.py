"""
Package: config
Description: Library settings and AWS session construction.
"""
